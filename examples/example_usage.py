"""Example: drive the service layer directly (no Flask).

Controllers are thin; the business rules live in the services.
"""

import importlib

from config import get_settings_module

from src.geoattend.geoattend.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        db_config=settings.DB_CONFIG,
        office_timezone=getattr(settings, "OFFICE_TIMEZONE", None),
    )

    dashboard = container.report_service.build_dashboard()
    print(dashboard.summary)
    for point in dashboard.weekly:
        print(point.to_dict())


if __name__ == "__main__":
    main()
