"""
Audit Log — append-only record of what the simulator did on whose behalf.

Behavioral Contract:
- Append-only. No entry is ever modified or deleted.
- One entry per notable event: scenario started, interaction processed,
  scenario completed, reward requested, reward failed.
- Queryable by user, by action, and by recency.
- Defaults to an in-memory SQLite database, so nothing outlives the process.
"""

import json
import sqlite3
import threading
from datetime import datetime
from enum import Enum
from typing import List, Optional
from uuid import uuid4

from pydantic import BaseModel


class AuditSeverity(str, Enum):
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"
    AUDIT = "AUDIT"


class AuditEntry(BaseModel):
    id: str
    timestamp: datetime
    user_id: str
    action: str                             # e.g. "TOKEN_ISSUE_REQUEST"
    details: dict = {}
    severity: AuditSeverity = AuditSeverity.INFO


class AuditLog:
    """
    Append-only audit trail.
    SQLite-backed; writes are serialised so the log can be shared by the
    FastAPI worker threads.
    """

    def __init__(self, db_path: str = ":memory:"):
        self.db_path = db_path
        self._conn = sqlite3.connect(db_path, check_same_thread=False)
        self._conn.row_factory = sqlite3.Row
        self._lock = threading.Lock()
        self._init_schema()

    def _init_schema(self) -> None:
        """Create the audit table if it doesn't exist."""
        self._conn.execute("""
            CREATE TABLE IF NOT EXISTS audit_log (
                id TEXT PRIMARY KEY,
                timestamp TEXT NOT NULL,
                user_id TEXT NOT NULL,
                action TEXT NOT NULL,
                severity TEXT NOT NULL,
                details_json TEXT NOT NULL
            )
        """)
        self._conn.execute("""
            CREATE INDEX IF NOT EXISTS idx_audit_user_id ON audit_log(user_id)
        """)
        self._conn.execute("""
            CREATE INDEX IF NOT EXISTS idx_audit_action ON audit_log(action)
        """)
        self._conn.commit()

    def record(
        self,
        user_id: str,
        action: str,
        details: Optional[dict] = None,
        severity: AuditSeverity = AuditSeverity.INFO,
    ) -> AuditEntry:
        """Append one entry and return it."""
        entry = AuditEntry(
            id=f"audit_{uuid4().hex[:12]}",
            timestamp=datetime.utcnow(),
            user_id=user_id,
            action=action,
            details=details or {},
            severity=severity,
        )
        with self._lock:
            self._conn.execute(
                """
                INSERT INTO audit_log (id, timestamp, user_id, action, severity, details_json)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    entry.id,
                    entry.timestamp.isoformat(),
                    entry.user_id,
                    entry.action,
                    entry.severity.value,
                    json.dumps(entry.details, default=str),
                ),
            )
            self._conn.commit()
        return entry

    def _deserialize(self, row: sqlite3.Row) -> AuditEntry:
        return AuditEntry(
            id=row["id"],
            timestamp=datetime.fromisoformat(row["timestamp"]),
            user_id=row["user_id"],
            action=row["action"],
            details=json.loads(row["details_json"]),
            severity=AuditSeverity(row["severity"]),
        )

    def _query(self, sql: str, params: tuple = ()) -> List[AuditEntry]:
        with self._lock:
            rows = self._conn.execute(sql, params).fetchall()
        return [self._deserialize(r) for r in rows]

    def query_by_user(self, user_id: str) -> List[AuditEntry]:
        """All entries recorded for a user, oldest first."""
        return self._query(
            "SELECT * FROM audit_log WHERE user_id = ? ORDER BY rowid",
            (user_id,),
        )

    def query_by_action(self, action: str) -> List[AuditEntry]:
        """All entries for one action type, oldest first."""
        return self._query(
            "SELECT * FROM audit_log WHERE action = ? ORDER BY rowid",
            (action,),
        )

    def query_recent(self, limit: int = 50) -> List[AuditEntry]:
        """The most recent entries, oldest first."""
        entries = self._query(
            "SELECT * FROM audit_log ORDER BY rowid DESC LIMIT ?",
            (limit,),
        )
        return list(reversed(entries))

    def count(self) -> int:
        """Total number of audit entries."""
        with self._lock:
            row = self._conn.execute("SELECT COUNT(*) as cnt FROM audit_log").fetchone()
        return row["cnt"]

    def close(self) -> None:
        """Close the database connection."""
        self._conn.close()
