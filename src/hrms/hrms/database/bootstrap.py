from __future__ import annotations

import logging
import re
from datetime import date
from pathlib import Path
from typing import Iterator

from werkzeug.security import generate_password_hash

from .connection import DatabaseConnection, DBConfig

logger = logging.getLogger(__name__)

_CREATE_DB_RE = re.compile(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$")
_USE_DB_RE = re.compile(r"(?im)^\s*USE\b.*?;\s*$")


def _connection(db_config: dict, *, with_database: bool = True):
    return DatabaseConnection(DBConfig.from_dict(db_config)).connect(with_database=with_database)


def strip_database_statements(sql: str) -> str:
    """Drop CREATE DATABASE / USE lines so scripts run against the configured database."""
    return _USE_DB_RE.sub("", _CREATE_DB_RE.sub("", sql))


def split_sql_statements(sql: str) -> Iterator[str]:
    """Split a script on ';' that are not inside quotes."""
    start = 0
    quote = None
    i = 0
    while i < len(sql):
        ch = sql[i]
        if ch == "\\":
            i += 2
            continue
        if quote:
            if ch == quote:
                quote = None
        elif ch in ("'", '"'):
            quote = ch
        elif ch == ";":
            stmt = sql[start:i].strip()
            if stmt:
                yield stmt
            start = i + 1
        i += 1

    tail = sql[start:].strip()
    if tail:
        yield tail


def ensure_database_exists(db_config: dict) -> None:
    name = DBConfig.from_dict(db_config).database
    conn = _connection(db_config, with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(f"CREATE DATABASE IF NOT EXISTS `{name}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci")
        conn.commit()
    finally:
        conn.close()


def run_sql_file(db_config: dict, *, path: str | Path) -> int:
    sql = strip_database_statements(Path(path).read_text(encoding="utf-8"))
    conn = _connection(db_config)
    count = 0
    try:
        cur = conn.cursor()
        for stmt in split_sql_statements(sql):
            cur.execute(stmt)
            count += 1
        conn.commit()
    finally:
        conn.close()
    logger.info("Applied %s statements from %s", count, path)
    return count


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)
    run_sql_file(db_config, path=schema_path)


def apply_seed_sql(db_config: dict, *, seed_path: str | Path) -> None:
    run_sql_file(db_config, path=seed_path)


def ensure_admin_account(db_config: dict, *, email: str, password: str) -> None:
    """Create the admin employee, or reset its password and role if it exists."""
    password_hash = generate_password_hash(password)
    conn = _connection(db_config)
    try:
        cur = conn.cursor(dictionary=True)
        cur.execute("SELECT employee_id FROM employees WHERE email=%s", (email,))
        if cur.fetchone():
            cur.execute(
                "UPDATE employees SET password_hash=%s, role='admin', is_active=1 WHERE email=%s",
                (password_hash, email),
            )
        else:
            cur.execute(
                """
                INSERT INTO employees(first_name, last_name, email, password_hash, role, position, hire_date, is_permanent)
                VALUES(%s,%s,%s,%s,'admin',%s,%s,1)
                """,
                ("System", "Admin", email, password_hash, "Administrator", date.today()),
            )
        conn.commit()
    finally:
        conn.close()
    logger.info("Admin account ready: %s", email)


def list_tables(db_config: dict) -> list[str]:
    conn = _connection(db_config)
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
