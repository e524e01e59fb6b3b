# src/o365sub/ui/presenters/render.py
from __future__ import annotations
import json
from typing import Any, Iterator, List, Optional, Tuple

from o365sub.core.models import ContentRecord, SubscriptionRecord

STATUS_LIST = "status-list"
RESTART_RESULT = "restart-result"
CONTENT_LIST = "content-list"

SUBSCRIPTION_FIELDS = ("contentType", "status", "webhook")
CONTENT_FIELDS = ("contentUri", "contentId", "contentType", "contentCreated", "contentExpiration")

HEADERS = {
    STATUS_LIST: "✅ Subscription Status:",
    RESTART_RESULT: "🔄 Restart Subscription:",
    CONTENT_LIST: "📋 Retrieved Event Logs:",
}

NO_RECORDS = "(no records)"


def decode(raw: str) -> Any:
    """JSON body or None; never raises."""
    try:
        return json.loads(raw) if raw and raw.strip() else None
    except ValueError:
        return None

def _walk(node: Any, fields: Tuple[str, ...]) -> Iterator[dict]:
    """
    Objects carrying at least one of fields, in document order. A matching
    object is not descended into (a subscription's webhook has its own status).
    """
    if isinstance(node, dict):
        if any(f in node for f in fields):
            yield node
            return
        for v in node.values():
            yield from _walk(v, fields)
    elif isinstance(node, list):
        for v in node:
            yield from _walk(v, fields)

def _text(v: Any) -> Optional[str]:
    if v is None or isinstance(v, (dict, list)):
        return None
    return str(v)

def _webhook(v: Any) -> Optional[str]:
    if isinstance(v, dict):
        v = v.get("address")
    return _text(v) or None

def parse_subscriptions(raw: str) -> List[SubscriptionRecord]:
    return [
        SubscriptionRecord(
            content_type=_text(d.get("contentType")),
            status=_text(d.get("status")),
            webhook=_webhook(d.get("webhook")),
        )
        for d in _walk(decode(raw), SUBSCRIPTION_FIELDS)
    ]

def parse_content(raw: str) -> List[ContentRecord]:
    return [
        ContentRecord(
            content_uri=_text(d.get("contentUri")),
            content_id=_text(d.get("contentId")),
            content_type=_text(d.get("contentType")),
            content_created=_text(d.get("contentCreated")),
            content_expiration=_text(d.get("contentExpiration")),
        )
        for d in _walk(decode(raw), CONTENT_FIELDS)
    ]

def _subscription_lines(rec: SubscriptionRecord) -> List[str]:
    lines: List[str] = []
    if rec.content_type is not None:
        lines.append(f"- Content Type: {rec.content_type}")
    if rec.status is not None:
        lines.append(f"  Status: {rec.status}")
    lines.append(f"  Webhook: {rec.webhook or 'None'}")
    return lines

def render_status_list(raw: str) -> List[str]:
    lines: List[str] = []
    for rec in parse_subscriptions(raw):
        lines.extend(_subscription_lines(rec))
        lines.append("")
    return lines

def render_restart(raw: str) -> List[str]:
    lines: List[str] = []
    for rec in parse_subscriptions(raw):
        lines.extend(_subscription_lines(rec))
    return lines

def render_content_list(raw: str) -> List[str]:
    """
    Produces blocks like:

      🔗 Content URI: https://...
      🆔 Content ID: 20250101...
      📂 Content Type: Audit.AzureActiveDirectory
      🗓 Created: 2025-01-01T00:00:00.000Z
      ⌛ Expires: 2025-01-08T00:00:00.000Z
    """
    labelled = (
        ("content_uri", "🔗 Content URI"),
        ("content_id", "🆔 Content ID"),
        ("content_type", "📂 Content Type"),
        ("content_created", "🗓 Created"),
        ("content_expiration", "⌛ Expires"),
    )
    lines: List[str] = []
    for rec in parse_content(raw):
        lines.append("")
        for attr, label in labelled:
            v = getattr(rec, attr)
            if v is not None:
                lines.append(f"{label}: {v}")
    return lines

_RECIPES = {
    STATUS_LIST: render_status_list,
    RESTART_RESULT: render_restart,
    CONTENT_LIST: render_content_list,
}

def render(raw: str, view: str) -> List[str]:
    if view not in _RECIPES:
        raise ValueError(f"unknown view {view!r}")
    body = _RECIPES[view](raw)
    return ["", HEADERS[view]] + (body or [NO_RECORDS])

def print_view(raw: str, view: str, out=print) -> None:
    for line in render(raw, view):
        out(line)
