"""
Application Store — SQLite-backed record store for tracked job applications.
Stands in for the hosted tracker: create, read and update by record id.
"""

import os
import sqlite3
from datetime import datetime, timezone
from typing import Optional

from config.settings import settings
from models.application import JobApplication


# Columns a caller may change through update_application
UPDATABLE_FIELDS = ("company", "role", "status", "applied_date", "link", "location", "notes")


def _get_connection(db_path: str = None) -> sqlite3.Connection:
    """Get a SQLite connection, creating the database and directory if needed."""
    db_path = db_path or settings.db_path
    directory = os.path.dirname(db_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


def init_db(db_path: str = None) -> None:
    """Create the applications table if it doesn't exist."""
    conn = _get_connection(db_path)
    try:
        conn.execute("""
            CREATE TABLE IF NOT EXISTS applications (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                company TEXT NOT NULL DEFAULT '',
                role TEXT NOT NULL DEFAULT '',
                status TEXT NOT NULL DEFAULT 'applied',
                applied_date TEXT NOT NULL,
                link TEXT NOT NULL DEFAULT '',
                location TEXT NOT NULL DEFAULT '',
                notes TEXT NOT NULL DEFAULT '',
                created_at TEXT NOT NULL,
                updated_at TEXT NOT NULL
            )
        """)
        conn.execute("""
            CREATE INDEX IF NOT EXISTS idx_applications_link ON applications(link)
        """)
        conn.commit()
    finally:
        conn.close()


def _row_to_application(row: sqlite3.Row) -> JobApplication:
    return JobApplication(
        id=row["id"],
        company=row["company"],
        role=row["role"],
        status=row["status"],
        applied_date=row["applied_date"],
        link=row["link"],
        location=row["location"],
        notes=row["notes"],
    )


def create_application(application: JobApplication, db_path: str = None) -> int:
    """
    Insert a new application.

    Returns:
        The id of the new record.
    """
    now = datetime.now(timezone.utc).isoformat()
    conn = _get_connection(db_path)
    try:
        cursor = conn.execute(
            "INSERT INTO applications (company, role, status, applied_date, link, location, notes, created_at, updated_at) "
            "VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)",
            (
                application.company,
                application.role,
                application.status,
                application.applied_date,
                application.link,
                application.location,
                application.notes,
                now,
                now,
            ),
        )
        conn.commit()
        print(f"[Store] Saved application #{cursor.lastrowid}: {application.role} at {application.company or '?'}")
        return cursor.lastrowid
    finally:
        conn.close()


def get_application(application_id: int, db_path: str = None) -> Optional[JobApplication]:
    """Fetch one application by id, or None if it doesn't exist."""
    conn = _get_connection(db_path)
    try:
        row = conn.execute("SELECT * FROM applications WHERE id = ?", (application_id,)).fetchone()
        return _row_to_application(row) if row else None
    finally:
        conn.close()


def find_by_link(link: str, db_path: str = None) -> list[JobApplication]:
    """Return every application saved for a posting URL, oldest first."""
    conn = _get_connection(db_path)
    try:
        rows = conn.execute("SELECT * FROM applications WHERE link = ? ORDER BY id", (link,)).fetchall()
        return [_row_to_application(row) for row in rows]
    finally:
        conn.close()


def update_application(application_id: int, db_path: str = None, **fields) -> bool:
    """
    Update selected fields of an application.

    Args:
        application_id: Record id.
        db_path: Path to SQLite database.
        **fields: Column values to change (see UPDATABLE_FIELDS).

    Returns:
        True if a record was updated, False if the id doesn't exist.

    Raises:
        ValueError: for unknown field names.
        pydantic.ValidationError: for invalid values (e.g. an unknown status).
    """
    unknown = sorted(set(fields) - set(UPDATABLE_FIELDS))
    if unknown:
        raise ValueError(f"Cannot update unknown application fields: {', '.join(unknown)}")

    existing = get_application(application_id, db_path)
    if existing is None:
        return False
    if not fields:
        return True

    # Re-validate through the model so status stays one of the allowed values
    updated = JobApplication(**{**existing.model_dump(), **fields})

    assignments = ", ".join(f"{name} = ?" for name in fields)
    values = [getattr(updated, name) for name in fields]
    now = datetime.now(timezone.utc).isoformat()

    conn = _get_connection(db_path)
    try:
        conn.execute(
            f"UPDATE applications SET {assignments}, updated_at = ? WHERE id = ?",
            (*values, now, application_id),
        )
        conn.commit()
        return True
    finally:
        conn.close()


def get_application_count(db_path: str = None) -> int:
    """Return total number of tracked applications."""
    conn = _get_connection(db_path)
    try:
        cursor = conn.execute("SELECT COUNT(*) FROM applications")
        return cursor.fetchone()[0]
    finally:
        conn.close()
