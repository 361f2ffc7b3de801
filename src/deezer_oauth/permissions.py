# Deezer permissions (see https://developers.deezer.com/api/permissions).
# Created: 2026-10-19

from __future__ import annotations

from enum import Enum


class Permission(str, Enum):
    BASIC_ACCESS = "basic_access"
    EMAIL = "email"
    OFFLINE_ACCESS = "offline_access"
    MANAGE_LIBRARY = "manage_library"
    MANAGE_COMMUNITY = "manage_community"
    DELETE_LIBRARY = "delete_library"
    LISTENING_HISTORY = "listening_history"

    def __str__(self) -> str:
        return self.value


# Deezer grants basic_access anyway when nothing is requested
DEFAULT_PERMISSIONS: tuple[Permission, ...] = (Permission.BASIC_ACCESS,)
