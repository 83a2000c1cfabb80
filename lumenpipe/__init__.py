"""lumenpipe: build, sign and submit Stellar transactions."""

from lumenpipe.client import LumenClient
from lumenpipe.config_reader import LiveNetwork, Settings, SimulatedNetwork, network_from_name
from lumenpipe.core.domain.entities import Account, Payment
from lumenpipe.core.domain.errors import (
    BuildError, ErrorKind, LedgerError, NotFoundError, PipelineStateError, Rejection,
    RejectionError, SignError, SubmitError, error_string, unwrap_rejection,
)
from lumenpipe.core.domain.value_objects import Address, Asset, KeyPair, Memo, MemoType, Seed, Thresholds
from lumenpipe.core.pipeline.tx import Tx, TxState

__all__ = [
    "LumenClient",
    "LiveNetwork",
    "SimulatedNetwork",
    "Settings",
    "network_from_name",
    "Account",
    "Payment",
    "Asset",
    "Memo",
    "MemoType",
    "KeyPair",
    "Seed",
    "Address",
    "Thresholds",
    "Tx",
    "TxState",
    "ErrorKind",
    "LedgerError",
    "BuildError",
    "SignError",
    "SubmitError",
    "RejectionError",
    "NotFoundError",
    "PipelineStateError",
    "Rejection",
    "error_string",
    "unwrap_rejection",
]
