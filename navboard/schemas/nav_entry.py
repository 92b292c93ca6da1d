from __future__ import annotations

from pydantic import BaseModel

from navboard.navigation.routes import NavRoute


class NavEntry(BaseModel):
    key: NavRoute
    title: str
    path: str
    icon: str
    active: bool = False
