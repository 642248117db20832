"""
Domain Entities

Each entity lives in its own module.
"""

from .vehicle import PUBLIC_VEHICLE_FIELDS, Vehicle
from .share_link import ShareLink
from .notification import Notification

__all__ = [
    "Vehicle",
    "ShareLink",
    "Notification",
    "PUBLIC_VEHICLE_FIELDS",
]
