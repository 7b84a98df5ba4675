"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the month logic lives in services.
"""

import importlib
import sys

from config import get_settings_module

from src.office_presence.office_presence.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, holiday_region=settings.HOLIDAY_REGION)

    user_id = int(sys.argv[1]) if len(sys.argv) > 1 else 1
    view = container.month_service.load_month(user_id, 2025, 5, lenient=True)
    stats = view.stats
    print(
        f"{view.key.year_month}: {stats.present_count}/{stats.workday_count} days "
        f"({stats.percent:.1f}%), required {stats.required_days}, missing {stats.shortfall}"
    )


if __name__ == "__main__":
    main()
