"""
Validation helpers for values handed to the Stellar operation builders.

Amounts use the network's fixed-point format: up to 7 fractional digits,
at most MAX_AMOUNT (int64 max stroops).
"""

import re
from decimal import Decimal

from stellar_sdk import MuxedAccount, StrKey

MAX_AMOUNT = Decimal("922337203685.4775807")
MAX_WEIGHT = 255

_amount_pattern = re.compile(r"\d+(\.\d{1,7})?")


def is_valid_stellar_address(address) -> bool:
    try:
        if address.startswith('G'):
            StrKey.decode_ed25519_public_key(address)
        elif address.startswith('M'):
            MuxedAccount.from_account(address)
        else:
            return False
        return True
    except Exception:
        return False


def is_valid_stellar_seed(seed) -> bool:
    return isinstance(seed, str) and StrKey.is_valid_ed25519_secret_seed(seed)


def check_amount(amount: str, name: str = "amount") -> str:
    if not isinstance(amount, str) or not _amount_pattern.fullmatch(amount):
        raise ValueError(f"{name} must be a decimal string with at most 7 fractional digits, got {amount!r}")
    value = Decimal(amount)
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {amount!r}")
    if value > MAX_AMOUNT:
        raise ValueError(f"{name} must not exceed {MAX_AMOUNT}, got {amount!r}")
    return amount


def check_weight(weight: int, name: str = "weight") -> int:
    if isinstance(weight, bool) or not isinstance(weight, int) or not 0 <= weight <= MAX_WEIGHT:
        raise ValueError(f"{name} must be an integer between 0 and {MAX_WEIGHT}, got {weight!r}")
    return weight


def _shown(address) -> str:
    # never echo something that may be a mistyped secret key
    if isinstance(address, str) and address.strip().upper().startswith('S'):
        return "<hidden>"
    return repr(address)


def check_address(address: str, name: str = "address") -> str:
    if not isinstance(address, str) or not is_valid_stellar_address(address):
        raise ValueError(f"{name} is not a valid Stellar address: {_shown(address)}")
    return address


def check_account_id(address: str, name: str = "address") -> str:
    # signer keys and source accounts must be plain G... keys
    if not isinstance(address, str) or not StrKey.is_valid_ed25519_public_key(address):
        raise ValueError(f"{name} is not a valid Stellar account id: {_shown(address)}")
    return address
