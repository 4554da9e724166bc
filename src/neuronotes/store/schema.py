"""Schema description and introspection for the NeuroNotes database."""

import sqlite3

# Tables and their columns, in declaration order, once every migration is applied
EXPECTED_SCHEMA: dict[str, list[str]] = {
    "workspaces": ["id", "name", "order"],
    "folders": ["id", "name", "workspace_id", "order"],
    "notes": [
        "id",
        "title",
        "content_html",
        "updated_at",
        "workspace_id",
        "folder_id",
        "order",
        "type",
        "spreadsheet",
    ],
    "calendarEvents": [
        "id",
        "date",
        "title",
        "time",
        "workspace_id",
        "repeat",
        "repeat_on",
        "repeat_end",
        "exceptions",
        "color",
    ],
    "kanban": ["workspace_id", "columns"],
    "settings": ["key", "value"],
}


def list_tables(conn: sqlite3.Connection) -> list[str]:
    """Get names of user tables, sorted.

    Args:
        conn: Open SQLite connection.

    Returns:
        Table names, excluding SQLite's internal tables.
    """
    cursor = conn.execute(
        "SELECT name FROM sqlite_master "
        "WHERE type = 'table' AND name NOT LIKE 'sqlite_%' ORDER BY name"
    )
    return [row[0] for row in cursor.fetchall()]


def inspect_schema(conn: sqlite3.Connection) -> dict[str, list[str]]:
    """Get the columns of every user table.

    Args:
        conn: Open SQLite connection.

    Returns:
        Mapping of table name to its column names in declaration order.
    """
    schema = {}
    for table in list_tables(conn):
        quoted = table.replace('"', '""')
        cursor = conn.execute(f'PRAGMA table_info("{quoted}")')
        schema[table] = [row[1] for row in cursor.fetchall()]
    return schema
