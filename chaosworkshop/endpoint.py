"""Routing of request paths to handler functions."""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

METHODS = ("GET", "POST")


@dataclass
class Response:
    """An HTTP response produced by a handler."""

    status: int = 200
    body: str | bytes = b""
    content_type: str = "text/plain"
    headers: dict[str, str] = field(default_factory=dict)


Handler = Callable[[Any], Response]


class EndpointRegistry:
    """Handlers keyed by HTTP method and exact path."""

    def __init__(self) -> None:
        self._handlers: dict[tuple[str, str], Handler] = {}

    @staticmethod
    def _method(method: str) -> str:
        normalized = method.upper()
        if normalized not in METHODS:
            raise ValueError(f"unsupported method {method!r}")
        return normalized

    def register(self, method: str, path: str, handler: Handler) -> Handler:
        """Add ``handler`` for ``method`` and ``path``; a path may be taken once."""
        key = (self._method(method), path)
        if key in self._handlers:
            raise ValueError(f"{key[0]} {path} is already registered")
        self._handlers[key] = handler
        return handler

    def get(self, path: str) -> Callable[[Handler], Handler]:
        """Decorator registering a GET handler."""
        return lambda handler: self.register("GET", path, handler)

    def post(self, path: str) -> Callable[[Handler], Handler]:
        """Decorator registering a POST handler."""
        return lambda handler: self.register("POST", path, handler)

    def resolve(self, method: str, path: str) -> Handler | None:
        """Return the handler for ``method`` and ``path``, or None."""
        return self._handlers.get((self._method(method), path))


registry = EndpointRegistry()