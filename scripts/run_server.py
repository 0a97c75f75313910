"""Start the Flask server on the first free port at or above PORT."""
from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import load_settings

from src.timesheet_system.timesheet_system.common.network import find_available_port, get_local_ip
from src.timesheet_system.timesheet_system.core.constants import DEFAULT_PORT, PORT_SCAN_RANGE
from src.timesheet_system.timesheet_system.main import create_app


def main() -> None:
    load_dotenv(override=False)
    settings = load_settings()
    start_port = int(getattr(settings, "PORT", DEFAULT_PORT))

    try:
        port = find_available_port(start_port, start_port + PORT_SCAN_RANGE)
    except RuntimeError as e:
        print(f"Failed to start server: {e}")
        sys.exit(1)

    app = create_app(settings_overrides={"PORT": port})
    ip = get_local_ip()
    print("Server running on:")
    print(f"   Local: http://localhost:{port}")
    print(f"   Network: http://{ip}:{port}")
    print(f"   Admin API: http://{ip}:{port}/admin/users-data")
    app.run(host="0.0.0.0", port=port, debug=bool(app.config.get("DEBUG")), use_reloader=False)


if __name__ == "__main__":
    main()
