from __future__ import annotations

from typing import Any, Iterable

from navboard.schemas.nav_entry import NavEntry


def to_payload(entries: Iterable[NavEntry]) -> list[dict[str, Any]]:
    return [entry.model_dump(mode="json") for entry in entries]


def to_text(entries: Iterable[NavEntry]) -> str:
    lines = []
    for entry in entries:
        marker = "* " if entry.active else "  "
        lines.append(f"{marker}{entry.title} ({entry.path})")
    return "\n".join(lines)
