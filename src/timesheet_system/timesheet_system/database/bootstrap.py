from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, Sequence

import mysql.connector
from werkzeug.security import generate_password_hash

from ..categories.schema import DEFAULT_SCHEMA, CategorySchema
from ..core.constants import AUTHORITATIVE_FIRST_TIER_HOURS, DEFAULT_PROJECT_NAMES
from .connection import DBConfig, DatabaseConnection

logger = logging.getLogger(__name__)


def _connect(db_config: dict, *, with_database: bool = True):
    return DatabaseConnection(DBConfig.from_dict(db_config)).connect(with_database=with_database)


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for schema/seed files (handles ';' inside quotes).
    buf: list[str] = []
    in_single = False
    in_double = False
    escape = False

    for ch in sql:
        if escape:
            buf.append(ch)
            escape = False
            continue

        if ch == "\\":
            buf.append(ch)
            escape = True
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
        elif ch == '"' and not in_single:
            in_double = not in_double
        elif ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def time_entries_ddl(schema: CategorySchema = DEFAULT_SCHEMA) -> str:
    """CREATE TABLE for time_entries, one DOUBLE column per schema category."""

    category_cols = ",\n".join(f"    `{key}` DOUBLE NOT NULL DEFAULT 0" for key in schema.keys)
    return f"""CREATE TABLE IF NOT EXISTS time_entries (
    id INT AUTO_INCREMENT PRIMARY KEY,
    user_id INT NOT NULL,
    work_date DATE NOT NULL,
{category_cols},
    remarks TEXT,
    available_hours DOUBLE NOT NULL DEFAULT {AUTHORITATIVE_FIRST_TIER_HOURS},
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
    UNIQUE KEY uniq_time_entries_user_date (user_id, work_date),
    CONSTRAINT fk_time_entries_user FOREIGN KEY (user_id) REFERENCES users (id) ON DELETE CASCADE
)"""


def ensure_database_exists(db_config: dict) -> None:
    target = DBConfig.from_dict(db_config)
    conn = _connect(db_config, with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path, schema: CategorySchema = DEFAULT_SCHEMA) -> None:
    ensure_database_exists(db_config)

    sql = _strip_create_db_and_use(Path(schema_path).read_text(encoding="utf-8"))

    conn = _connect(db_config)
    try:
        cur = conn.cursor()
        for stmt in _iter_sql_statements(sql):
            cur.execute(stmt)
        cur.execute(time_entries_ddl(schema))
        conn.commit()
    finally:
        conn.close()
    logger.info("Schema applied to %s", DBConfig.from_dict(db_config).database)


def ensure_default_projects(db_config: dict, names: Sequence[str] = DEFAULT_PROJECT_NAMES) -> None:
    conn = _connect(db_config)
    try:
        cur = conn.cursor()
        for name in names:
            cur.execute("INSERT IGNORE INTO projects (name) VALUES (%s)", (name,))
        conn.commit()
    finally:
        conn.close()


def ensure_demo_users(db_config: dict) -> None:
    conn = _connect(db_config)
    try:
        cur = conn.cursor(dictionary=True)

        def upsert_user(ps_number: str, name: str, password: str) -> None:
            cur.execute(
                """
                INSERT INTO users (ps_number, password, name)
                VALUES (%s, %s, %s)
                ON DUPLICATE KEY UPDATE password=VALUES(password), name=VALUES(name)
                """,
                (ps_number, generate_password_hash(password), name),
            )

        upsert_user("PS1001", "Demo User", "demo123")
        upsert_user("PS1002", "Second User", "demo123")
        conn.commit()
    finally:
        conn.close()


def list_tables(db_config: dict) -> list[str]:
    conn = _connect(db_config)
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    except mysql.connector.Error:
        logger.exception("Could not list tables")
        raise
    finally:
        conn.close()
