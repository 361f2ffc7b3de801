# Deezer OAuth: login URL generation + code exchange.
# Created: 2026-10-19

from __future__ import annotations

import inspect
import logging
import math
import urllib.parse
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

import httpx

from deezer_oauth.config import Settings, get_settings
from deezer_oauth.errors import NotYetSupported, ProviderError, UnknownResponse
from deezer_oauth.permissions import DEFAULT_PERMISSIONS, Permission
from deezer_oauth.util import to_csv, validate_argument

logger = logging.getLogger(__name__)

SessionCallback = Callable[[Any, "SessionResult | None"], Any]


@dataclass
class SessionResult:
    """Access token returned by Deezer for one user."""

    access_token: str
    expires: int | float = 0  # seconds left, 0 = never expires

    @property
    def never_expires(self) -> bool:
        return self.expires == 0


def _parse_expires(raw: str) -> int | float | None:
    """Coerce the `expires` field to a non-negative number, or None if malformed."""
    raw = raw.strip()
    if not raw:
        return 0
    # int() and float() both accept digit separators, numbers never carry them
    if "_" in raw:
        return None
    try:
        value: int | float = int(raw)
    except ValueError:
        try:
            value = float(raw)
        except ValueError:
            return None
        if math.isnan(value) or math.isinf(value):
            return None
        if value.is_integer():
            value = int(value)
    if value < 0:
        return None
    return value


class DeezerOAuth:
    """Deezer OAuth helper.

    Builds the login URL and exchanges authorization codes for access tokens.
    Nothing is stored: credentials are passed per call and every exchange is a
    single GET request.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        self.settings = settings or get_settings()
        self._client = client

    def get_login_url(
        self,
        app_id: str | int,
        redirect_url: str,
        perms: Sequence[Permission | str] | None = None,
    ) -> str:
        """Build the URL the user should be redirected to.

        Args:
            app_id: Application id from the Deezer developer portal.
            redirect_url: URL that will receive the user's code. Must be within
                the application domain registered with Deezer.
            perms: Requested permissions. Defaults to basic_access.

        Returns:
            Authentication URL with app_id, redirect_uri and perms set.
        """
        validate_argument("app_id", app_id, ["str", "int"])
        validate_argument("redirect_url", redirect_url, ["str"])
        validate_argument("perms", perms, ["list", "None"])

        if perms is None:
            perms = DEFAULT_PERMISSIONS

        params = {
            "app_id": app_id,
            "redirect_uri": redirect_url,
            "perms": to_csv(perms),
        }
        return f"{self.settings.auth_url}?{urllib.parse.urlencode(params)}"

    async def exchange_code(self, app_id: str | int, secret: str, code: str) -> SessionResult:
        """Exchange an authorization code for an access token.

        Args:
            app_id: Application id from the Deezer developer portal.
            secret: Application secret from the Deezer developer portal.
            code: The code Deezer sent to the redirect URL.

        Returns:
            SessionResult with the access token and its lifetime.

        Raises:
            InvalidArgument: before any request if an argument has the wrong type.
            httpx.HTTPError: if the request itself fails.
            ProviderError: if Deezer answers with anything but a token.
            UnknownResponse: if Deezer answers with an empty body.
        """
        validate_argument("app_id", app_id, ["str", "int"])
        validate_argument("code", code, ["str"])
        validate_argument("secret", secret, ["str"])

        params = {"app_id": app_id, "secret": secret, "code": code}
        url = self.settings.token_url
        logger.debug("Requesting Deezer access token from %s", url)

        if self._client is not None:
            resp = await self._client.get(url, params=params)
        else:
            async with httpx.AsyncClient() as client:
                resp = await client.get(url, params=params)

        logger.debug("Deezer token endpoint answered %s", resp.status_code)
        return self._parse_token_response(resp)

    def _parse_token_response(self, resp: httpx.Response) -> SessionResult:
        body = resp.text
        if resp.status_code != 200 and body:
            logger.debug("Deezer token error (status %s): %s", resp.status_code, body)
            raise ProviderError(body, resp.status_code)
        if not body:
            raise UnknownResponse(resp)

        # e.g. access_token=abc123&expires=3600
        data = urllib.parse.parse_qs(body, keep_blank_values=True)
        access_token = data.get("access_token", [""])[0]
        if not access_token:
            raise ProviderError(body, resp.status_code)

        expires = _parse_expires(data.get("expires", [""])[0])
        if expires is None:
            raise ProviderError(body, resp.status_code)

        return SessionResult(access_token=access_token, expires=expires)

    async def create_session(
        self,
        app_id: str | int,
        secret: str,
        code: str,
        callback: SessionCallback,
    ) -> None:
        """Exchange a code and deliver the outcome as ``callback(error, result)``.

        The callback is called exactly once. On success it gets
        ``(None, SessionResult)``. Provider errors are delivered as the raw
        response body; transport errors, an invalid token URL and UnknownResponse
        as the exception.
        Argument errors are raised directly and the callback is not called.
        """
        validate_argument("app_id", app_id, ["str", "int"])
        validate_argument("code", code, ["str"])
        validate_argument("secret", secret, ["str"])
        validate_argument("callback", callback, ["callable"])

        error: Any = None
        result: SessionResult | None = None
        try:
            result = await self.exchange_code(app_id, secret, code)
        except ProviderError as e:
            error = e.body
        except (UnknownResponse, httpx.HTTPError, httpx.InvalidURL) as e:
            error = e

        outcome = callback(error, result)
        if inspect.isawaitable(outcome):
            await outcome

    def check_session(
        self,
        access_token: str | None = None,
        callback: SessionCallback | None = None,
    ) -> None:
        # Deezer exposes no endpoint to look up a token
        raise NotYetSupported("check_session")

    def destroy_session(
        self,
        access_token: str | None = None,
        callback: SessionCallback | None = None,
    ) -> None:
        # Deezer exposes no endpoint to revoke a token
        raise NotYetSupported("destroy_session")
