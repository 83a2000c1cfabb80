from enum import Enum
from typing import List, Optional, Union

from loguru import logger
from stellar_sdk import Account as SdkAccount
from stellar_sdk import DecoratedSignature, TransactionBuilder, TransactionEnvelope
from stellar_sdk.exceptions import SdkError

from lumenpipe.core.domain.errors import BuildError, LedgerError, PipelineStateError, SignError, SubmitError
from lumenpipe.core.domain.value_objects import Address, Memo, MemoType, Seed, SourceIdentifier, SubmissionResult
from lumenpipe.core.interfaces.services import IKeyService, ILedgerTransport
from lumenpipe.core.pipeline.operations import OperationSpec
from lumenpipe.utils.stellar_utils import check_account_id

Mutator = Union[OperationSpec, Memo]


class TxState(Enum):
    FRESH = "fresh"
    BUILT = "built"
    SIGNED = "signed"
    SUBMITTED = "submitted"
    FAILED = "failed"


class Tx:
    """
    One logical transaction: build, sign, submit, then read err.

    The first failing stage stores its error and every later stage becomes a
    no-op. Calling sign or submit before build raises PipelineStateError.
    """

    def __init__(
        self,
        transport: ILedgerTransport,
        key_service: IKeyService,
        network_passphrase: str,
        base_fee: int = 100,
        timeout: int = 180,
    ):
        self.transport = transport
        self.key_service = key_service
        self.network_passphrase = network_passphrase
        self.base_fee = base_fee
        self.timeout = timeout
        self.state = TxState.FRESH
        self.source_address: Optional[str] = None
        self.envelope: Optional[TransactionEnvelope] = None
        self.result: Optional[SubmissionResult] = None
        self._error: Optional[LedgerError] = None

    @property
    def client(self) -> ILedgerTransport:
        return self.transport

    @property
    def err(self) -> Optional[LedgerError]:
        return self._error

    @property
    def operations(self) -> list:
        if self.envelope is None:
            return []
        return list(self.envelope.transaction.operations)

    @property
    def signatures(self) -> List[DecoratedSignature]:
        if self.envelope is None:
            return []
        return list(self.envelope.signatures)

    def _fail(self, error: LedgerError) -> "Tx":
        self._error = error
        self.state = TxState.FAILED
        logger.warning(f"tx failed at {error.kind.value}: {error}")
        return self

    def _resolve_address(self, source: SourceIdentifier) -> str:
        if isinstance(source, Seed):
            try:
                return self.key_service.derive_address(source.value)
            except (ValueError, SdkError) as ex:
                # the message of ex may contain the seed itself
                raise BuildError("source seed is not valid key material") from ex
        if isinstance(source, Address):
            try:
                return check_account_id(source.value, "source address")
            except ValueError:
                # a mistyped seed lands here when signers are given
                raise BuildError("source address is not a valid Stellar account id") from None
        raise BuildError(f"unsupported source identifier: {type(source).__name__}")

    def _build_envelope(self, address: str, mutators) -> TransactionEnvelope:
        try:
            account = self.transport.load_account(address)
        except LedgerError as ex:
            raise BuildError(f"could not resolve source account {address}: {ex}") from ex

        builder = TransactionBuilder(
            source_account=SdkAccount(address, account.sequence),
            network_passphrase=self.network_passphrase,
            base_fee=self.base_fee,
        )
        builder.set_timeout(self.timeout)

        operation_count = 0
        try:
            for mutator in mutators:
                if isinstance(mutator, Memo):
                    if mutator.type != MemoType.NONE:
                        builder.add_memo(mutator.to_sdk())
                elif isinstance(mutator, OperationSpec):
                    builder.append_operation(mutator.to_operation())
                    operation_count += 1
                else:
                    raise ValueError(f"unsupported transaction mutator: {type(mutator).__name__}")
            if operation_count == 0:
                raise ValueError("transaction has no operations")
            return builder.build()
        except (ValueError, SdkError) as ex:
            raise BuildError(str(ex)) from ex

    def build(self, source: SourceIdentifier, *mutators: Mutator) -> "Tx":
        """Assemble the envelope for source with mutators in the given order."""
        if self.state != TxState.FRESH:
            raise PipelineStateError("build can only be called once per Tx")

        try:
            self.source_address = self._resolve_address(source)
            self.envelope = self._build_envelope(self.source_address, mutators)
        except BuildError as ex:
            return self._fail(ex)

        self.state = TxState.BUILT
        logger.debug(
            f"built tx for {self.source_address}: seq {self.envelope.transaction.sequence}, "
            f"{len(self.envelope.transaction.operations)} operation(s)"
        )
        return self

    def sign(self, *seeds: Union[str, Seed]) -> "Tx":
        """Append one signature per seed (plain string or Seed). Can be called more than once."""
        if self.state == TxState.FRESH:
            raise PipelineStateError("sign called before build")
        if self.state == TxState.SUBMITTED:
            raise PipelineStateError("cannot sign a submitted transaction")
        if self.state == TxState.FAILED:
            return self

        if not seeds:
            return self._fail(SignError("no signers given"))

        payload = self.envelope.hash()
        signatures = []
        for index, seed in enumerate(seeds, start=1):
            if isinstance(seed, Seed):
                seed = seed.value
            elif not isinstance(seed, str):
                return self._fail(SignError(f"signer #{index} must be a seed, got {type(seed).__name__}"))
            try:
                signatures.append(self.key_service.sign(seed, payload))
            except (ValueError, SdkError, TypeError):
                return self._fail(SignError(f"signer #{index} is not valid key material"))

        for signature in signatures:
            if signature not in self.envelope.signatures:
                self.envelope.signatures.append(signature)

        self.state = TxState.SIGNED
        return self

    def submit(self) -> "Tx":
        if self.state == TxState.FRESH:
            raise PipelineStateError("submit called before build")
        if self.state == TxState.SUBMITTED:
            raise PipelineStateError("transaction already submitted, build a new Tx to resubmit")
        if self.state == TxState.FAILED:
            return self

        try:
            self.result = self.transport.submit_envelope(self.envelope)
        except SubmitError as ex:
            return self._fail(ex)

        self._error = None
        self.state = TxState.SUBMITTED
        logger.info(f"tx {self.result.transaction_hash} from {self.source_address} accepted in ledger {self.result.ledger}")
        return self
