from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from navboard.navigation.gates import capabilities_from_mapping, capabilities_from_permissions
from navboard.schemas.capabilities import Capabilities


logger = logging.getLogger(__name__)


class ProfileStore:
    """Named capability presets read from a JSON file.

    Each profile is either a list of ``"<action>:<resource>"`` permission
    strings or a nested access object such as
    ``{"access": {"artifacts": true}, "read": {"work_pool": false}}``.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._profiles: dict[str, Any] | None = None

    def _load(self) -> dict[str, Any]:
        if self._profiles is not None:
            return self._profiles
        if not self.path.exists():
            raise FileNotFoundError(f"Profiles file not found: {self.path}")
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ValueError(f"Profiles file is not valid JSON: {self.path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ValueError(f"Profiles file must hold a JSON object at the top level: {self.path}")
        logger.debug("Loaded %d profiles from %s", len(data), self.path)
        self._profiles = data
        return data

    def names(self) -> list[str]:
        return sorted(self._load())

    def get(self, name: str) -> Capabilities:
        profiles = self._load()
        if name not in profiles:
            raise KeyError(f"Unknown profile {name!r}; available: {', '.join(sorted(profiles)) or 'none'}")
        entry = profiles[name]
        if isinstance(entry, list):
            if not all(isinstance(item, str) for item in entry):
                raise ValueError(f"Profile {name!r} must list permissions as strings")
            return capabilities_from_permissions(entry)
        if isinstance(entry, dict):
            return capabilities_from_mapping(entry)
        raise ValueError(f"Profile {name!r} must be a list of permissions or an access object")


def load_profile_store(path: Path) -> ProfileStore:
    return ProfileStore(path)
