from __future__ import annotations

from enum import Enum


class NavRoute(str, Enum):
    DASHBOARD = "DASHBOARD"
    FLOW_RUNS = "FLOW_RUNS"
    FLOWS = "FLOWS"
    DEPLOYMENTS = "DEPLOYMENTS"
    WORK_POOLS = "WORK_POOLS"
    WORK_QUEUES = "WORK_QUEUES"
    BLOCKS = "BLOCKS"
    VARIABLES = "VARIABLES"
    NOTIFICATIONS = "NOTIFICATIONS"
    CONCURRENCY = "CONCURRENCY"
    ARTIFACTS = "ARTIFACTS"
    SETTINGS = "SETTINGS"


SIDEBAR_ORDER = list(NavRoute)

ROUTE_TITLES = {
    NavRoute.DASHBOARD: "Dashboard",
    NavRoute.FLOW_RUNS: "Flow Runs",
    NavRoute.FLOWS: "Flows",
    NavRoute.DEPLOYMENTS: "Deployments",
    NavRoute.WORK_POOLS: "Work Pools",
    NavRoute.WORK_QUEUES: "Work Queues",
    NavRoute.BLOCKS: "Blocks",
    NavRoute.VARIABLES: "Variables",
    NavRoute.NOTIFICATIONS: "Notifications",
    NavRoute.CONCURRENCY: "Concurrency",
    NavRoute.ARTIFACTS: "Artifacts",
    NavRoute.SETTINGS: "Settings",
}

ROUTE_PATHS = {
    NavRoute.DASHBOARD: "/dashboard",
    NavRoute.FLOW_RUNS: "/runs",
    NavRoute.FLOWS: "/flows",
    NavRoute.DEPLOYMENTS: "/deployments",
    NavRoute.WORK_POOLS: "/work-pools",
    NavRoute.WORK_QUEUES: "/work-queues",
    NavRoute.BLOCKS: "/blocks",
    NavRoute.VARIABLES: "/variables",
    NavRoute.NOTIFICATIONS: "/notifications",
    NavRoute.CONCURRENCY: "/concurrency-limits",
    NavRoute.ARTIFACTS: "/artifacts",
    NavRoute.SETTINGS: "/settings",
}

ROUTE_ICONS = {
    NavRoute.DASHBOARD: "home",
    NavRoute.FLOW_RUNS: "play",
    NavRoute.FLOWS: "flow",
    NavRoute.DEPLOYMENTS: "rocket",
    NavRoute.WORK_POOLS: "server",
    NavRoute.WORK_QUEUES: "queue",
    NavRoute.BLOCKS: "cube",
    NavRoute.VARIABLES: "variable",
    NavRoute.NOTIFICATIONS: "bell",
    NavRoute.CONCURRENCY: "gauge",
    NavRoute.ARTIFACTS: "paper-clip",
    NavRoute.SETTINGS: "cog",
}
