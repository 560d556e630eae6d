"""
Reward Issuer — mints token grants and certificates.

There is no ledger behind it: each call returns a fresh record and leaves an
AUDIT entry. Callers treat issuance as best-effort and must catch failures.
"""

import logging
from typing import Optional
from uuid import uuid4

from cultural_advisor.audit.log import AuditLog, AuditSeverity
from cultural_advisor.models.reward import RewardRecord

logger = logging.getLogger(__name__)


class RewardIssuer:
    def __init__(self, audit_log: Optional[AuditLog] = None):
        self.audit_log = audit_log

    def _audit(self, user_id: str, action: str, details: dict) -> None:
        if self.audit_log is not None:
            self.audit_log.record(user_id, action, details, AuditSeverity.AUDIT)

    def issue_tokens(self, user_id: str, amount: int, reason: str) -> RewardRecord:
        """Grant `amount` tokens to a user."""
        self._audit(user_id, "TOKEN_ISSUE_REQUEST", {"amount": amount, "reason": reason})
        record = RewardRecord(
            type="token",
            id=f"txn_token_{uuid4().hex[:12]}",
            amount=amount,
        )
        logger.info("Issued %d tokens to %s (%s)", amount, user_id, reason)
        return record

    def grant_certificate(self, user_id: str, certificate_type: str) -> RewardRecord:
        """Grant a completion certificate to a user."""
        self._audit(user_id, "CERTIFICATE_GRANT_REQUEST", {"certificate_type": certificate_type})
        record = RewardRecord(type="certificate", id=f"cert_{uuid4().hex[:12]}")
        logger.info("Granted certificate %s to %s", certificate_type, user_id)
        return record
