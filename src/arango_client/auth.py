"""HTTP basic authentication for ArangoDB endpoints."""

from __future__ import annotations

import base64
from typing import Mapping

from .logger import BoundLogger


class AuthManager:
    """Adds the Authorization header according to the configured credentials."""

    def __init__(
        self,
        username: str | None,
        password: str | None,
        logger: BoundLogger,
    ) -> None:
        self.username = username
        self.password = password
        self._logger = logger.child("auth")

    @property
    def has_credentials(self) -> bool:
        return bool(self.username and self.password)

    def authorization_value(self) -> str | None:
        if not self.has_credentials:
            return None
        token = f"{self.username}:{self.password}".encode("utf-8")
        return "Basic " + base64.b64encode(token).decode("ascii")

    def add_http_headers(self, headers: Mapping[str, str] | None = None) -> dict[str, str]:
        merged = dict(headers or {})
        value = self.authorization_value()
        if value is None:
            return merged

        self._logger.trace("Attaching basic credentials for user %s", self.username)
        merged["Authorization"] = value
        return merged


__all__ = ["AuthManager"]
