"""Pydantic schemas for the Horizon account resource."""

from typing import List, Optional

from pydantic import BaseModel

from lumenpipe.core.domain.entities import Account
from lumenpipe.core.domain.value_objects import Asset, Thresholds


class HorizonBalance(BaseModel):
    asset_type: str
    balance: str
    asset_code: Optional[str] = None
    asset_issuer: Optional[str] = None
    limit: Optional[str] = None


class HorizonSigner(BaseModel):
    key: str
    weight: int
    type: str = "ed25519_public_key"


class HorizonThresholds(BaseModel):
    low_threshold: int = 0
    med_threshold: int = 0
    high_threshold: int = 0


class HorizonAccount(BaseModel):
    account_id: str
    sequence: int
    balances: List[HorizonBalance] = []
    signers: List[HorizonSigner] = []
    thresholds: HorizonThresholds = HorizonThresholds()
    home_domain: Optional[str] = None

    def to_account(self) -> Account:
        balances = {}
        for b in self.balances:
            if b.asset_type == 'liquidity_pool_shares':
                continue
            if b.asset_type == 'native':
                balances[Asset.native()] = b.balance
            else:
                balances[Asset.credit(b.asset_code, b.asset_issuer)] = b.balance

        return Account(
            address=self.account_id,
            sequence=self.sequence,
            balances=balances,
            signers={s.key: s.weight for s in self.signers},
            thresholds=Thresholds(
                low=self.thresholds.low_threshold,
                medium=self.thresholds.med_threshold,
                high=self.thresholds.high_threshold,
            ),
            home_domain=self.home_domain,
        )
