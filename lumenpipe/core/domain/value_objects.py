from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from stellar_sdk import Asset as SdkAsset
from stellar_sdk import IdMemo, Memo as SdkMemo, NoneMemo, TextMemo


@dataclass(frozen=True)
class KeyPair:
    address: str
    seed: str = field(repr=False)


@dataclass(frozen=True)
class Seed:
    value: str = field(repr=False)


@dataclass(frozen=True)
class Address:
    value: str


# Source account of a transaction: either the secret key or only the public address.
SourceIdentifier = Union[Seed, Address]


@dataclass(frozen=True)
class Asset:
    code: str = ""
    issuer: str = ""

    @classmethod
    def native(cls) -> "Asset":
        return cls()

    @classmethod
    def credit(cls, code: str, issuer: str) -> "Asset":
        return cls(code=code, issuer=issuer)

    @property
    def is_native(self) -> bool:
        return self.code == "" and self.issuer == ""

    @property
    def asset_type(self) -> str:
        if self.is_native:
            return "native"
        if len(self.code) <= 4:
            return "credit_alphanum4"
        return "credit_alphanum12"

    def to_string(self) -> str:
        if self.is_native:
            return "native"
        return f"{self.code}:{self.issuer}"

    def to_sdk(self) -> SdkAsset:
        """Convert to a stellar_sdk asset. Raises ValueError for a malformed code or issuer."""
        if self.is_native:
            return SdkAsset.native()
        return SdkAsset(self.code, self.issuer)


class MemoType(Enum):
    NONE = 0
    TEXT = 1
    ID = 2


@dataclass(frozen=True)
class Memo:
    type: MemoType = MemoType.NONE
    text: str = ""
    id: int = 0

    @classmethod
    def none(cls) -> "Memo":
        return cls()

    @classmethod
    def with_text(cls, text: str) -> "Memo":
        return cls(type=MemoType.TEXT, text=text)

    @classmethod
    def with_id(cls, memo_id: int) -> "Memo":
        return cls(type=MemoType.ID, id=memo_id)

    def to_sdk(self) -> SdkMemo:
        if self.type == MemoType.TEXT:
            return TextMemo(self.text)
        if self.type == MemoType.ID:
            return IdMemo(self.id)
        return NoneMemo()


@dataclass(frozen=True)
class Thresholds:
    low: int = 0
    medium: int = 0
    high: int = 0


@dataclass(frozen=True)
class SubmissionResult:
    transaction_hash: str
    ledger: int = 0
    successful: bool = True
    result_xdr: str = ""
