"""
Share Link Use Cases

Issuing, managing and resolving public vehicle share links.
"""

from .create_share_use_case import CreateShareUseCase, generate_share_token
from .delete_share_use_case import DeleteShareUseCase
from .dtos import (
    DeleteShareResponse,
    PublicShareInfo,
    PublicVehicle,
    PublicVehicleView,
    ShareLinkResponse,
)
from .list_shares_use_case import ListSharesUseCase
from .resolve_public_share_use_case import ResolvePublicShareUseCase
from .update_share_use_case import UpdateShareUseCase

__all__ = [
    "ListSharesUseCase",
    "CreateShareUseCase",
    "UpdateShareUseCase",
    "DeleteShareUseCase",
    "ResolvePublicShareUseCase",
    "generate_share_token",
    "ShareLinkResponse",
    "DeleteShareResponse",
    "PublicVehicle",
    "PublicShareInfo",
    "PublicVehicleView",
]
