"""Database information and management through ``_api/database``.

Creating and dropping databases is only permitted from the ``_system``
database, so those calls need a connection without a database name or one
bound to ``_system``.
"""

from __future__ import annotations

from typing import Any, Sequence

from .parameters import ParameterName
from .protocol import ApiBaseUri, HttpMethod, Request, path
from .resource import Resource, field, operation
from .types import AResult


class ADatabase(Resource):
    logger_name = "database"

    @operation
    def get_current(self) -> AResult[dict[str, Any]]:
        """Information about the database the connection points at."""
        request = Request(HttpMethod.GET, ApiBaseUri.DATABASE, path("current"))
        return self._execute(request, (200,), extract=field("result"))

    @operation
    def get_accessible(self) -> AResult[list[str]]:
        """Databases the current user can access."""
        request = Request(HttpMethod.GET, ApiBaseUri.DATABASE, path("user"))
        return self._execute(request, (200,), extract=field("result"))

    @operation
    def get_all(self) -> AResult[list[str]]:
        request = Request(HttpMethod.GET, ApiBaseUri.DATABASE)
        return self._execute(request, (200,), extract=field("result"))

    @operation
    def create(self, database_name: str, users: Sequence[dict[str, Any]] | None = None) -> AResult[bool]:
        self._require(database_name=database_name)
        request = Request(HttpMethod.POST, ApiBaseUri.DATABASE)
        body: dict[str, Any] = {ParameterName.NAME: database_name}
        if users:
            body[ParameterName.USERS] = [dict(user) for user in users]
        request.set_body(body)
        return self._execute(request, (201,), extract=field("result"))

    @operation
    def delete(self, database_name: str) -> AResult[bool]:
        self._require(database_name=database_name)
        request = Request(HttpMethod.DELETE, ApiBaseUri.DATABASE, path(database_name))
        return self._execute(request, (200,), extract=field("result"))

    @operation
    def version(self) -> AResult[dict[str, Any]]:
        """Server name, version and license."""
        request = Request(HttpMethod.GET, ApiBaseUri.VERSION)
        return self._execute(request, (200,))


__all__ = ["ADatabase"]
