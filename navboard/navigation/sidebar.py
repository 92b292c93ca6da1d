from __future__ import annotations

import logging
from typing import Iterable

from navboard.navigation.gates import capabilities_from_permissions, evaluate_route_gates
from navboard.navigation.routes import ROUTE_ICONS, ROUTE_PATHS, ROUTE_TITLES, SIDEBAR_ORDER
from navboard.schemas.capabilities import Capabilities
from navboard.schemas.nav_entry import NavEntry


logger = logging.getLogger(__name__)


def _normalize_path(path: str) -> str:
    path = path.split("?", 1)[0].split("#", 1)[0]
    path = "/" + path.strip().strip("/")
    return path


def _matches(entry_path: str, current_path: str) -> bool:
    return current_path == entry_path or current_path.startswith(entry_path + "/")


def mark_active(entries: Iterable[NavEntry], current_path: str | None) -> list[NavEntry]:
    """Flag the entry whose path is the longest segment-aligned prefix of ``current_path``."""
    entries = list(entries)
    if current_path is None:
        return [entry.model_copy(update={"active": False}) for entry in entries]

    current = _normalize_path(current_path)
    best: NavEntry | None = None
    for entry in entries:
        if _matches(_normalize_path(entry.path), current):
            if best is None or len(_normalize_path(entry.path)) > len(_normalize_path(best.path)):
                best = entry

    if best is None:
        logger.debug("No sidebar entry matches path %s", current_path)
    return [entry.model_copy(update={"active": entry is best}) for entry in entries]


def build_sidebar(caps: Capabilities, current_path: str | None = None) -> list[NavEntry]:
    gates = evaluate_route_gates(caps)
    entries = [
        NavEntry(
            key=route,
            title=ROUTE_TITLES[route],
            path=ROUTE_PATHS[route],
            icon=ROUTE_ICONS[route],
        )
        for route in SIDEBAR_ORDER
        if gates[route]
    ]
    hidden = [route.value for route in SIDEBAR_ORDER if not gates[route]]
    logger.debug("Sidebar built with %d entries, hidden: %s", len(entries), hidden)
    return mark_active(entries, current_path)


def visible_titles(caps: Capabilities) -> list[str]:
    return [entry.title for entry in build_sidebar(caps)]


def sidebar_for_permissions(permissions: Iterable[str], current_path: str | None = None) -> list[NavEntry]:
    return build_sidebar(capabilities_from_permissions(permissions), current_path=current_path)
