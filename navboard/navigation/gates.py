from __future__ import annotations

import logging
from typing import Any, Iterable

from navboard.navigation.routes import SIDEBAR_ORDER, NavRoute
from navboard.schemas.capabilities import AccessFlags, Capabilities, ReadFlags


logger = logging.getLogger(__name__)

WILDCARD_PERMISSION = "*"

# action -> resources that flip a flag of the same name
KNOWN_PERMISSIONS = {
    "access": set(AccessFlags.model_fields),
    "read": set(ReadFlags.model_fields),
}


def work_pools_enabled(caps: Capabilities) -> bool:
    return caps.access.work_pools and caps.read.work_pool


def artifacts_enabled(caps: Capabilities) -> bool:
    return caps.access.artifacts


def evaluate_route_gates(caps: Capabilities) -> dict[NavRoute, bool]:
    pools = work_pools_enabled(caps)
    gates = {route: True for route in SIDEBAR_ORDER}
    gates[NavRoute.WORK_POOLS] = pools
    gates[NavRoute.WORK_QUEUES] = not pools
    gates[NavRoute.ARTIFACTS] = artifacts_enabled(caps)
    return gates


def _split_permission(permission: str) -> tuple[str, str]:
    parts = permission.split(":")
    if len(parts) != 2:
        raise ValueError(f"Permission must look like '<action>:<resource>', got {permission!r}")
    action, resource = (part.strip().lower() for part in parts)
    if not action or not resource:
        raise ValueError(f"Permission has an empty action or resource: {permission!r}")
    return action, resource


def capabilities_from_permissions(permissions: Iterable[str]) -> Capabilities:
    granted: dict[str, dict[str, bool]] = {action: {} for action in KNOWN_PERMISSIONS}
    wildcard = False
    for permission in permissions:
        if not isinstance(permission, str):
            raise ValueError(f"Permission must be a string, got {permission!r}")
        if permission.strip() == WILDCARD_PERMISSION:
            wildcard = True
            continue
        action, resource = _split_permission(permission)
        if resource not in KNOWN_PERMISSIONS.get(action, set()):
            logger.debug("Ignoring permission with no sidebar gate: %s", permission)
            continue
        granted[action][resource] = True
    if wildcard:
        return Capabilities.allow_all()
    return Capabilities.model_validate(granted)


def capabilities_from_mapping(data: dict[str, Any]) -> Capabilities:
    return Capabilities.model_validate(data)
