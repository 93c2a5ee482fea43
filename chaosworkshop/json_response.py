"""Building JSON response bodies."""

import json
from dataclasses import dataclass, field
from typing import Any


@dataclass
class JsonResponse:
    """A JSON object built up with chained ``set`` calls."""

    data: dict[str, Any] = field(default_factory=dict)

    def set(self, key: str, value: Any) -> "JsonResponse":
        """Set ``key`` to ``value`` and return this response."""
        self.data[key] = value
        return self

    def dumps(self) -> str:
        """Serialise as compact JSON with sorted keys."""
        return json.dumps(self.data, sort_keys=True, separators=(",", ":"), ensure_ascii=False)

    def __str__(self) -> str:
        return self.dumps()


def formulate() -> JsonResponse:
    """Return an empty response."""
    return JsonResponse()


def formulate_success() -> JsonResponse:
    """Return a response marked as successful."""
    return JsonResponse().set("success", True)


def formulate_failure(reason: str) -> JsonResponse:
    """Return a response marked as failed with ``reason``."""
    return JsonResponse().set("success", False).set("reason", reason)