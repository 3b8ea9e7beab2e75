"""Explicit route table.

A route table is an ordered tuple of :class:`Route` entries, each binding one
``(method, path)`` pair to one endpoint. Tables are built once at startup and
turned into an ``APIRouter`` by :func:`create_router`.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel

Endpoint = Callable[..., Awaitable[Any]]


@dataclass(frozen=True)
class Route:
    method: str
    path: str
    endpoint: Endpoint
    response_model: type[BaseModel]
    name: str
    summary: str = ""
    tags: tuple[str, ...] = ()


class DuplicateRouteError(ValueError):
    """Raised when two entries of a route table bind the same method and path."""


def create_router(routes: Iterable[Route]) -> APIRouter:
    """Register every route of the table on a new router.

    Raises:
        DuplicateRouteError: If a ``(method, path)`` pair appears twice.
    """
    router = APIRouter()
    seen: set[tuple[str, str]] = set()

    for route in routes:
        key = (route.method.upper(), route.path)
        if key in seen:
            raise DuplicateRouteError(f"{key[0]} {key[1]} is bound twice")
        seen.add(key)

        router.add_api_route(
            route.path,
            route.endpoint,
            methods=[key[0]],
            response_model=route.response_model,
            name=route.name,
            summary=route.summary or None,
            tags=list(route.tags) or None,
        )

    return router
