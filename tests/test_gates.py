from __future__ import annotations

import pytest
from pydantic import ValidationError

from navboard.navigation.gates import (
    artifacts_enabled,
    capabilities_from_mapping,
    capabilities_from_permissions,
    evaluate_route_gates,
    work_pools_enabled,
)
from navboard.navigation.routes import SIDEBAR_ORDER, NavRoute
from navboard.schemas.capabilities import Capabilities


def test_work_pools_need_access_and_read() -> None:
    only_access = capabilities_from_mapping({"access": {"work_pools": True}})
    only_read = capabilities_from_mapping({"read": {"work_pool": True}})
    both = capabilities_from_mapping({"access": {"work_pools": True}, "read": {"work_pool": True}})

    assert work_pools_enabled(only_access) is False
    assert work_pools_enabled(only_read) is False
    assert work_pools_enabled(both) is True


def test_route_gates_default_capabilities() -> None:
    gates = evaluate_route_gates(Capabilities())
    assert set(gates) == set(SIDEBAR_ORDER)
    assert gates[NavRoute.WORK_POOLS] is False
    assert gates[NavRoute.WORK_QUEUES] is True
    assert gates[NavRoute.ARTIFACTS] is False
    assert gates[NavRoute.SETTINGS] is True


def test_permissions_map_to_flags() -> None:
    caps = capabilities_from_permissions(["access:work_pools", " READ : Work_Pool ", "access:artifacts"])
    assert caps == Capabilities.allow_all()
    assert artifacts_enabled(caps) is True


def test_unknown_permissions_are_ignored() -> None:
    caps = capabilities_from_permissions(["create:flow_run", "access:billing", "read:work_pool"])
    assert caps.read.work_pool is True
    assert caps.access.work_pools is False
    assert caps.access.artifacts is False


def test_wildcard_grants_everything() -> None:
    assert capabilities_from_permissions(["read:flow", "*"]) == Capabilities.allow_all()


@pytest.mark.parametrize("permission", ["", "access", "access:work_pools:extra", ":artifacts", "access: "])
def test_malformed_permission_raises(permission: str) -> None:
    with pytest.raises(ValueError):
        capabilities_from_permissions([permission])


@pytest.mark.parametrize(
    "permissions",
    [
        ["*", "access"],
        ["access", "*"],
        ["*", 1],
        ["read:work_pool", None],
    ],
)
def test_wildcard_does_not_hide_malformed_permissions(permissions: list) -> None:
    with pytest.raises(ValueError):
        capabilities_from_permissions(permissions)


@pytest.mark.parametrize("value", ["yes", 1, 0, "true"])
def test_mapping_rejects_non_boolean_flags(value: object) -> None:
    with pytest.raises(ValidationError):
        capabilities_from_mapping({"access": {"artifacts": value}})


def test_mapping_ignores_unknown_keys() -> None:
    caps = capabilities_from_mapping({"access": {"artifacts": True, "billing": True}, "deploy": {"x": True}})
    assert caps.access.artifacts is True
