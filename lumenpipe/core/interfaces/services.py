from abc import ABC, abstractmethod

from stellar_sdk import DecoratedSignature, TransactionEnvelope

from lumenpipe.core.domain.entities import Account
from lumenpipe.core.domain.value_objects import KeyPair, SubmissionResult


class IKeyService(ABC):
    @abstractmethod
    def generate_keypair(self) -> KeyPair:
        """Generate a random keypair."""
        pass

    @abstractmethod
    def derive_address(self, seed: str) -> str:
        """Public address for a seed. Raises ValueError for invalid key material."""
        pass

    @abstractmethod
    def sign(self, seed: str, payload: bytes) -> DecoratedSignature:
        """Sign payload with seed. Raises ValueError for invalid key material."""
        pass


class ILedgerTransport(ABC):
    @abstractmethod
    def load_account(self, address: str) -> Account:
        """
        Load the current account snapshot.
        Raises NotFoundError for unknown accounts and SubmitError when the network fails.
        """
        pass

    @abstractmethod
    def submit_envelope(self, envelope: TransactionEnvelope) -> SubmissionResult:
        """
        Submit a signed envelope.
        Raises RejectionError when the ledger refuses it and SubmitError when the network fails.
        """
        pass
