from dataclasses import dataclass, field, replace
from typing import Dict, Optional, Tuple, Union

from lumenpipe.core.domain.value_objects import Asset, Memo, Seed, SourceIdentifier, Thresholds


@dataclass(frozen=True)
class Account:
    address: str = ""
    sequence: int = 0
    balances: Dict[Asset, str] = field(default_factory=dict)
    signers: Dict[str, int] = field(default_factory=dict)
    thresholds: Thresholds = Thresholds()
    home_domain: Optional[str] = None

    @classmethod
    def empty(cls, address: str = "") -> "Account":
        """Zero-valued snapshot, used when no network is involved."""
        return cls(address=address)

    def get_balance(self, asset: Asset) -> str:
        return self.balances.get(asset, "0")

    def get_native_balance(self) -> str:
        return self.get_balance(Asset.native())

    def get_master_weight(self) -> int:
        return self.signers.get(self.address, 0)


@dataclass(frozen=True)
class Payment:
    """
    Payment request consumed by LumenClient.pay.

    When signer_seeds is not empty, source only identifies the paying account
    and may be an address; the transaction is signed with signer_seeds instead.
    """
    source: Union[str, SourceIdentifier]
    target_address: str
    amount: str
    asset: Asset = Asset()
    memo: Memo = Memo()
    signer_seeds: Tuple[Union[str, Seed], ...] = ()

    def with_asset(self, asset: Asset) -> "Payment":
        return replace(self, asset=asset)

    def with_memo_text(self, text: str) -> "Payment":
        return replace(self, memo=Memo.with_text(text))

    def with_memo_id(self, memo_id: int) -> "Payment":
        return replace(self, memo=Memo.with_id(memo_id))

    def with_signer(self, seed: Union[str, Seed]) -> "Payment":
        return replace(self, signer_seeds=self.signer_seeds + (seed,))
