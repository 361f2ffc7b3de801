# Errors raised by the Deezer OAuth helpers.
# Created: 2026-10-19

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import httpx


class DeezerOAuthError(Exception):
    """Base class for errors raised by this package."""


class InvalidArgument(DeezerOAuthError, TypeError):
    """A caller-supplied argument has the wrong type."""

    def __init__(self, name: str, value: Any, accepted: Sequence[str]):
        self.name = name
        self.value = value
        self.accepted = list(accepted)
        super().__init__(
            f"Invalid argument `{name}`: got {value!r} "
            f"({type(value).__name__}), expected one of: {', '.join(self.accepted)}"
        )


class UnknownResponse(DeezerOAuthError):
    """Deezer answered with an empty body."""

    def __init__(self, response: httpx.Response):
        self.response = response
        super().__init__(
            f"Unknown response from Deezer (status {response.status_code}, empty body)"
        )


class ProviderError(DeezerOAuthError):
    """Deezer answered with something other than a token.

    The endpoint has no documented error schema, so the raw body is kept as-is.
    """

    def __init__(self, body: str, status_code: int | None = None):
        self.body = body
        self.status_code = status_code
        super().__init__(body)


class NotYetSupported(DeezerOAuthError, NotImplementedError):
    """The Deezer API has no endpoint for this operation."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"`{operation}` is not yet supported by the Deezer API")
