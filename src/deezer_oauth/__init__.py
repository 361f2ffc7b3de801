"""Deezer OAuth helper: login URL + access token exchange."""

from __future__ import annotations

from collections.abc import Sequence

from deezer_oauth.config import Settings, get_settings
from deezer_oauth.errors import (
    DeezerOAuthError,
    InvalidArgument,
    NotYetSupported,
    ProviderError,
    UnknownResponse,
)
from deezer_oauth.oauth import DeezerOAuth, SessionCallback, SessionResult
from deezer_oauth.permissions import DEFAULT_PERMISSIONS, Permission
from deezer_oauth.util import to_csv, validate_argument

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_PERMISSIONS",
    "DeezerOAuth",
    "DeezerOAuthError",
    "InvalidArgument",
    "NotYetSupported",
    "Permission",
    "ProviderError",
    "SessionResult",
    "Settings",
    "UnknownResponse",
    "check_session",
    "create_session",
    "destroy_session",
    "exchange_code",
    "get_login_url",
    "get_settings",
    "to_csv",
    "validate_argument",
]


def get_login_url(
    app_id: str | int,
    redirect_url: str,
    perms: Sequence[Permission | str] | None = None,
) -> str:
    return DeezerOAuth().get_login_url(app_id, redirect_url, perms)


async def exchange_code(app_id: str | int, secret: str, code: str) -> SessionResult:
    return await DeezerOAuth().exchange_code(app_id, secret, code)


async def create_session(
    app_id: str | int, secret: str, code: str, callback: SessionCallback
) -> None:
    await DeezerOAuth().create_session(app_id, secret, code, callback)


def check_session(
    access_token: str | None = None, callback: SessionCallback | None = None
) -> None:
    DeezerOAuth().check_session(access_token, callback)


def destroy_session(
    access_token: str | None = None, callback: SessionCallback | None = None
) -> None:
    DeezerOAuth().destroy_session(access_token, callback)
