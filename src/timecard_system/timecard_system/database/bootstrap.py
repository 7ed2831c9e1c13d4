from __future__ import annotations

import re
from pathlib import Path
from typing import Iterator

import mysql.connector

from ..core.constants import REQUIRED_TABLES
from .connection import DatabaseConnection
from .mysql_base import translate_error


def _strip_create_db_and_use(sql: str) -> str:
    # schema.sql must work whatever DB_NAME is configured.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _strip_comments(sql: str) -> str:
    return "\n".join(line for line in sql.splitlines() if not line.strip().startswith("--"))


def iter_sql_statements(sql: str) -> Iterator[str]:
    """Split a script on ';' outside of quoted literals."""

    start = 0
    quote = None
    i = 0
    while i < len(sql):
        ch = sql[i]
        if quote:
            if ch == "\\":
                i += 1
            elif ch == quote:
                quote = None
        elif ch in ("'", '"', "`"):
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


def ensure_database_exists(conn_factory: DatabaseConnection) -> None:
    name = conn_factory.config.database
    try:
        conn = conn_factory.connect(with_database=False)
        try:
            cur = conn.cursor()
            cur.execute(f"CREATE DATABASE IF NOT EXISTS `{name}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci")
            conn.commit()
        finally:
            conn.close()
    except mysql.connector.Error as e:
        raise translate_error(e) from e


def apply_schema(conn_factory: DatabaseConnection, *, schema_path: str | Path) -> None:
    ensure_database_exists(conn_factory)
    sql = _strip_comments(_strip_create_db_and_use(Path(schema_path).read_text(encoding="utf-8")))

    try:
        conn = conn_factory.connect()
        try:
            cur = conn.cursor()
            for stmt in iter_sql_statements(sql):
                cur.execute(stmt)
            conn.commit()
        finally:
            conn.close()
    except mysql.connector.Error as e:
        raise translate_error(e) from e


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    try:
        conn = conn_factory.connect()
        try:
            cur = conn.cursor()
            cur.execute("SHOW TABLES")
            return [str(row[0]) for row in cur.fetchall()]
        finally:
            conn.close()
    except mysql.connector.Error as e:
        raise translate_error(e) from e


def missing_tables(tables: list[str]) -> list[str]:
    present = {t.lower() for t in tables}
    return [t for t in REQUIRED_TABLES if t not in present]
