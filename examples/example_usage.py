"""Example: use the service layer directly (no Flask).

Controllers are thin; the accounting rules live in the services.
"""

from config import load_settings

from src.timesheet_system.timesheet_system.container import build_container


def main():
    settings = load_settings()
    container = build_container(db_config=settings.DB_CONFIG, admin_password=settings.ADMIN_PASSWORD)

    entry = container.time_entry_service.save(
        {"userId": 1, "date": "2024-01-01", "komatsu": "6", "training_hours": "2.5", "remarks": "example"}
    )
    print("available_hours:", entry.available_hours)

    for aggregate in container.report_service.build_distribution():
        print(aggregate.to_dict())


if __name__ == "__main__":
    main()
