"""Announcing workshop changes through a chat webhook."""

import json
import urllib.error
import urllib.request
from dataclasses import dataclass, field
from typing import Any

_TIMEOUT_SECONDS = 10


@dataclass
class WebhookOptions:
    """The content of one embed message."""

    author: str = ""
    title: str = ""
    fields: list[tuple[str, str]] = field(default_factory=list)
    description: str = ""
    footer: str = ""
    thumbnail: str = ""


def build_payload(options: WebhookOptions) -> dict[str, Any]:
    """Return the JSON body for a webhook message with one embed."""
    embed: dict[str, Any] = {}
    if options.title:
        embed["title"] = options.title
    if options.description:
        embed["description"] = options.description
    if options.fields:
        embed["fields"] = [
            {"name": name, "value": value, "inline": False} for name, value in options.fields
        ]
    if options.footer:
        embed["footer"] = {"text": options.footer}
    if options.author:
        embed["author"] = {"name": options.author}
    if options.thumbnail:
        embed["thumbnail"] = {"url": options.thumbnail}
    return {"embeds": [embed]}


def send(url: str, options: WebhookOptions) -> bool:
    """Post the message to ``url``; return whether it was accepted.

    An empty URL disables the webhook. Delivery failures are swallowed.
    """
    if not url:
        return False
    body = json.dumps(build_payload(options)).encode("utf-8")
    request = urllib.request.Request(
        url, data=body, headers={"Content-Type": "application/json"}, method="POST"
    )
    try:
        with urllib.request.urlopen(request, timeout=_TIMEOUT_SECONDS) as response:
            return 200 <= response.status < 300
    except (urllib.error.URLError, OSError, ValueError):
        return False