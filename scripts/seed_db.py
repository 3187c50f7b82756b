from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.geoattend.geoattend.core.constants import DEFAULT_OFFICE_SETTINGS
from src.geoattend.geoattend.database.bootstrap import ensure_default_settings


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    ensure_default_settings(db_config)

    print(
        "OK: Default office settings -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')} "
        f"(lat={DEFAULT_OFFICE_SETTINGS['latitude']}, lon={DEFAULT_OFFICE_SETTINGS['longitude']}, "
        f"radius={DEFAULT_OFFICE_SETTINGS['radius_m']}m, "
        f"{DEFAULT_OFFICE_SETTINGS['work_start']}-{DEFAULT_OFFICE_SETTINGS['work_end']})"
    )


if __name__ == "__main__":
    main()
