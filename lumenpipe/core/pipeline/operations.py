"""
Typed descriptors for the ledger operations the client can put in an envelope.

Descriptors only hold parameters. Tx.build calls to_operation() on each of
them, so malformed parameters surface as a BuildError of that pipeline.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from stellar_sdk import Asset as SdkAsset
from stellar_sdk import ChangeTrust, CreateAccount, Operation, Payment, SetOptions, Signer

from lumenpipe.core.domain.value_objects import Asset
from lumenpipe.utils.stellar_utils import check_account_id, check_address, check_amount, check_weight


class OperationSpec(ABC):
    @abstractmethod
    def to_operation(self) -> Operation:
        """Build the stellar_sdk operation. Raises ValueError on bad parameters."""
        pass


def _credit_asset(code: str, issuer: str) -> SdkAsset:
    if code == "" and issuer == "":
        raise ValueError("native asset is not allowed here")
    check_account_id(issuer, "asset issuer")
    return Asset.credit(code, issuer).to_sdk()


@dataclass(frozen=True)
class CreateAccountOp(OperationSpec):
    destination: str
    starting_balance: str

    def to_operation(self) -> Operation:
        check_account_id(self.destination, "destination")
        check_amount(self.starting_balance, "starting balance")
        return CreateAccount(destination=self.destination, starting_balance=self.starting_balance)


@dataclass(frozen=True)
class NativePaymentOp(OperationSpec):
    destination: str
    amount: str

    def to_operation(self) -> Operation:
        check_address(self.destination, "destination")
        check_amount(self.amount)
        return Payment(destination=self.destination, asset=SdkAsset.native(), amount=self.amount)


@dataclass(frozen=True)
class CreditPaymentOp(OperationSpec):
    destination: str
    code: str
    issuer: str
    amount: str

    def to_operation(self) -> Operation:
        check_address(self.destination, "destination")
        check_amount(self.amount)
        return Payment(destination=self.destination, asset=_credit_asset(self.code, self.issuer), amount=self.amount)


@dataclass(frozen=True)
class TrustOp(OperationSpec):
    """Trust line to code:issuer. limit None means no limit."""
    code: str
    issuer: str
    limit: Optional[str] = None

    @property
    def unlimited(self) -> bool:
        return self.limit is None

    def to_operation(self) -> Operation:
        asset = _credit_asset(self.code, self.issuer)
        if self.limit is None:
            return ChangeTrust(asset=asset)
        return ChangeTrust(asset=asset, limit=check_amount(self.limit, "trust limit"))


@dataclass(frozen=True)
class RemoveTrustOp(OperationSpec):
    code: str
    issuer: str

    def to_operation(self) -> Operation:
        return ChangeTrust(asset=_credit_asset(self.code, self.issuer), limit="0")


@dataclass(frozen=True)
class MasterWeightOp(OperationSpec):
    weight: int

    def to_operation(self) -> Operation:
        return SetOptions(master_weight=check_weight(self.weight, "master weight"))


@dataclass(frozen=True)
class AddSignerOp(OperationSpec):
    address: str
    weight: int

    def to_operation(self) -> Operation:
        check_account_id(self.address, "signer address")
        check_weight(self.weight, "signer weight")
        return SetOptions(signer=Signer.ed25519_public_key(self.address, self.weight))


@dataclass(frozen=True)
class RemoveSignerOp(OperationSpec):
    address: str

    def to_operation(self) -> Operation:
        check_account_id(self.address, "signer address")
        # weight 0 deletes the signer
        return SetOptions(signer=Signer.ed25519_public_key(self.address, 0))


@dataclass(frozen=True)
class ThresholdsOp(OperationSpec):
    low: int
    medium: int
    high: int

    def to_operation(self) -> Operation:
        return SetOptions(
            low_threshold=check_weight(self.low, "low threshold"),
            med_threshold=check_weight(self.medium, "medium threshold"),
            high_threshold=check_weight(self.high, "high threshold"),
        )
