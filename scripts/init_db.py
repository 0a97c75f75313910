"""Create the database and tables, seed the project catalog, optionally add demo users.

    python scripts/init_db.py            # schema + default projects
    python scripts/init_db.py --seed     # ... plus PS1001/PS1002 demo logins
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import load_settings

from src.timesheet_system.timesheet_system.database.bootstrap import (
    apply_schema,
    ensure_default_projects,
    ensure_demo_users,
    list_tables,
)
from src.timesheet_system.timesheet_system.database.connection import DBConfig

logger = logging.getLogger("init_db")


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--seed", action="store_true", help="also upsert the demo users")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    load_dotenv(override=False)
    db_config = dict(load_settings().DB_CONFIG)

    apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
    ensure_default_projects(db_config)
    if args.seed:
        ensure_demo_users(db_config)

    tables = list_tables(db_config)
    logger.info("Database ready %s tables=%s", DBConfig.from_dict(db_config).describe(), ", ".join(tables))


if __name__ == "__main__":
    main()
