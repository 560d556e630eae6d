"""Tests for the Reward Issuer."""

import pytest
from pydantic import ValidationError

from cultural_advisor.audit.log import AuditLog, AuditSeverity
from cultural_advisor.rewards.issuer import RewardIssuer


class TestRewardIssuer:
    def setup_method(self):
        self.audit_log = AuditLog()
        self.issuer = RewardIssuer(self.audit_log)

    def test_issue_tokens(self):
        record = self.issuer.issue_tokens("user_alice", 3, "Positive cultural interaction")
        assert record.type == "token"
        assert record.amount == 3
        assert record.id.startswith("txn_token_")

    def test_token_ids_are_unique(self):
        first = self.issuer.issue_tokens("user_alice", 1, "a")
        second = self.issuer.issue_tokens("user_alice", 1, "b")
        assert first.id != second.id

    def test_issue_tokens_audited(self):
        self.issuer.issue_tokens("user_alice", 3, "Positive cultural interaction")
        entries = self.audit_log.query_by_user("user_alice")
        assert len(entries) == 1
        assert entries[0].action == "TOKEN_ISSUE_REQUEST"
        assert entries[0].severity == AuditSeverity.AUDIT

    def test_grant_certificate(self):
        record = self.issuer.grant_certificate("user_alice", "SCEN001:GERMANY")
        assert record.type == "certificate"
        assert record.amount is None
        assert record.id.startswith("cert_")

        entries = self.audit_log.query_by_action("CERTIFICATE_GRANT_REQUEST")
        assert entries[0].details == {"certificate_type": "SCEN001:GERMANY"}

    def test_records_are_frozen(self):
        record = self.issuer.issue_tokens("user_alice", 3, "reason")
        with pytest.raises(ValidationError):
            record.amount = 100

    def test_issuer_without_audit_log(self):
        issuer = RewardIssuer()
        assert issuer.issue_tokens("user_alice", 2, "reason").amount == 2
