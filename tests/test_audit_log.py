"""Tests for the Audit Log."""

import threading

from cultural_advisor.audit.log import AuditLog, AuditSeverity


class TestAuditLog:
    def setup_method(self):
        self.log = AuditLog(db_path=":memory:")

    def teardown_method(self):
        self.log.close()

    def test_record_and_count(self):
        entry = self.log.record("u1", "SCENARIO_STARTED", {"instance_id": "s1"})
        assert entry.id.startswith("audit_")
        assert entry.severity == AuditSeverity.INFO
        assert self.log.count() == 1

    def test_details_round_trip(self):
        self.log.record("u1", "INTERACTION_PROCESSED", {"turn": 3, "impact": -25})
        entry = self.log.query_by_user("u1")[0]
        assert entry.details == {"turn": 3, "impact": -25}

    def test_query_by_user(self):
        self.log.record("u1", "A")
        self.log.record("u2", "B")
        self.log.record("u1", "C")
        assert [e.action for e in self.log.query_by_user("u1")] == ["A", "C"]

    def test_query_by_action(self):
        self.log.record("u1", "TOKEN_ISSUE_REQUEST", severity=AuditSeverity.AUDIT)
        self.log.record("u2", "SCENARIO_STARTED")
        entries = self.log.query_by_action("TOKEN_ISSUE_REQUEST")
        assert len(entries) == 1
        assert entries[0].severity == AuditSeverity.AUDIT

    def test_query_recent_oldest_first(self):
        for i in range(5):
            self.log.record("u1", f"ACTION_{i}")
        recent = self.log.query_recent(limit=3)
        assert [e.action for e in recent] == ["ACTION_2", "ACTION_3", "ACTION_4"]

    def test_concurrent_writes(self):
        def write(n):
            for i in range(20):
                self.log.record(f"user_{n}", "WRITE", {"i": i})

        threads = [threading.Thread(target=write, args=(n,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert self.log.count() == 80


class TestAuditLogPersistence:
    def test_file_backed_log(self, tmp_path):
        db_path = str(tmp_path / "audit.db")
        log = AuditLog(db_path=db_path)
        log.record("u1", "SCENARIO_STARTED")
        log.close()

        reopened = AuditLog(db_path=db_path)
        assert reopened.count() == 1
        reopened.close()
