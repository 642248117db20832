from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """DTO base - snake_case in Python, camelCase on the wire"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def isoformat_utc(value: Optional[datetime]) -> Optional[str]:
    """Render a stored naive-UTC timestamp as ISO-8601 with a Z suffix"""
    if value is None:
        return None
    return value.isoformat() + "Z"
