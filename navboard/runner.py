from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from navboard.navigation.gates import capabilities_from_permissions
from navboard.navigation.sidebar import build_sidebar
from navboard.render.mappers import to_payload, to_text
from navboard.schemas.capabilities import Capabilities
from navboard.store.profiles import load_profile_store


logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("text", "json")


def _log_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise SystemExit(f"NAVBOARD_LOG_LEVEL must be a logging level name such as DEBUG or WARNING, got {name!r}")
    return level


def _configure_logging() -> None:
    level = _log_level(os.getenv("NAVBOARD_LOG_LEVEL", "WARNING"))
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _resolve_capabilities() -> tuple[str, Capabilities]:
    permissions = os.getenv("NAVBOARD_PERMISSIONS")
    if permissions:
        items = [item for item in permissions.split(",") if item.strip()]
        return "permissions", capabilities_from_permissions(items)

    profiles_file = os.getenv("NAVBOARD_PROFILES_FILE")
    if not profiles_file:
        if os.getenv("NAVBOARD_PROFILE"):
            logger.warning("NAVBOARD_PROFILE is set but NAVBOARD_PROFILES_FILE is not; rendering the allow-all sidebar")
        return "allow-all", Capabilities.allow_all()

    profile = os.getenv("NAVBOARD_PROFILE")
    if not profile:
        raise SystemExit("NAVBOARD_PROFILE missing in .env (required with NAVBOARD_PROFILES_FILE)")
    store = load_profile_store(Path(profiles_file))
    return profile, store.get(profile)


def main() -> int:
    load_dotenv(".env")
    _configure_logging()

    output = os.getenv("NAVBOARD_OUTPUT", "text").lower()
    if output not in OUTPUT_FORMATS:
        raise SystemExit(f"NAVBOARD_OUTPUT must be one of {', '.join(OUTPUT_FORMATS)}, got {output!r}")

    try:
        source, caps = _resolve_capabilities()
    except (FileNotFoundError, KeyError, ValueError) as exc:
        raise SystemExit(f"Could not resolve capabilities: {exc}") from exc

    entries = build_sidebar(caps, current_path=os.getenv("NAVBOARD_CURRENT_PATH"))

    if output == "json":
        print(json.dumps({"source": source, "entries": to_payload(entries)}, indent=2))
    else:
        print(f"Sidebar for {source} ({len(entries)} entries):")
        print(to_text(entries))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
