from __future__ import annotations

import os


def _get_bool(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "y", "on")


def _get_str(name: str, default: str = "") -> str:
    return (os.getenv(name, default) or default).strip()


# --------------------------------------------------
# Logging
# --------------------------------------------------
LOG_LEVEL = _get_str("LOG_LEVEL", "INFO").upper()

# --------------------------------------------------
# Menu
# --------------------------------------------------
# Empty -> bundled food-truck menu (truckorder/api/menus/food_truck.yaml)
MENU_PATH = _get_str("MENU_PATH", "")

# --------------------------------------------------
# Telemetry
# --------------------------------------------------
TELEMETRY_ENABLED = _get_bool("TELEMETRY_ENABLED", "1")
