from typing import Dict, List, Optional

from loguru import logger
from stellar_sdk import TransactionEnvelope

from lumenpipe.core.domain.entities import Account
from lumenpipe.core.domain.value_objects import SubmissionResult
from lumenpipe.core.interfaces.services import ILedgerTransport


class SimulatedTransport(ILedgerTransport):
    """
    In-memory ledger transport, no network I/O.

    Unknown addresses load as zero-valued accounts. Submitted envelopes are
    kept in `submitted` and always accepted.
    """

    def __init__(self, accounts: Optional[Dict[str, Account]] = None):
        self.accounts = dict(accounts or {})
        self.submitted: List[TransactionEnvelope] = []

    def load_account(self, address: str) -> Account:
        return self.accounts.get(address) or Account.empty(address)

    def submit_envelope(self, envelope: TransactionEnvelope) -> SubmissionResult:
        self.submitted.append(envelope)
        tx_hash = envelope.hash_hex()
        logger.debug(f"simulated submit of tx {tx_hash}")
        return SubmissionResult(transaction_hash=tx_hash)
