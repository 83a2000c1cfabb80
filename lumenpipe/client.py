"""
LumenClient: one call per ledger capability.

In Stellar terms a private key is a seed and a public key is an address.
Mutating calls take the source account first and end with ``*signers``.
When signers are given, the source only identifies the account (it may be an
address) and the transaction is signed with the signer seeds, in order.
Without signers the source must be a seed and signs on its own.

Every mutating call returns the pipeline error or None. Use
``error_string`` or ``unwrap_rejection`` to read Horizon's rejection details.
"""

from typing import List, Optional, Union

from loguru import logger

from lumenpipe.config_reader import NetworkConfig, Settings, SimulatedNetwork, config, network_from_name
from lumenpipe.core.domain.entities import Account, Payment
from lumenpipe.core.domain.errors import LedgerError
from lumenpipe.core.domain.value_objects import Address, Asset, KeyPair, MemoType, Seed, SourceIdentifier
from lumenpipe.core.interfaces.services import IKeyService, ILedgerTransport
from lumenpipe.core.pipeline.operations import (
    AddSignerOp, CreateAccountOp, CreditPaymentOp, MasterWeightOp, NativePaymentOp,
    RemoveSignerOp, RemoveTrustOp, ThresholdsOp, TrustOp,
)
from lumenpipe.core.pipeline.tx import Mutator, Tx
from lumenpipe.infrastructure.factories.transport_factory import create_transport
from lumenpipe.infrastructure.services.key_service import StellarKeyService
from lumenpipe.utils.stellar_utils import is_valid_stellar_seed

Source = Union[str, Seed, Address]
SignerSeed = Union[str, Seed]


def resolve_source(source: Source, signers) -> SourceIdentifier:
    """Explicit Seed/Address pass through; a plain string is a seed unless signers take over."""
    if isinstance(source, (Seed, Address)):
        return source
    # strings shaped like secret keys stay Seeds, even when malformed
    if signers and not is_valid_stellar_seed(source) and not source.strip().upper().startswith('S'):
        return Address(source)
    return Seed(source)


def signing_seeds(source: SourceIdentifier, signers) -> List[str]:
    if signers:
        return [s.value if isinstance(s, Seed) else s for s in signers]
    if isinstance(source, Seed):
        return [source.value]
    return []


class LumenClient:
    def __init__(
        self,
        network: Union[NetworkConfig, str, None] = None,
        settings: Optional[Settings] = None,
        transport: Optional[ILedgerTransport] = None,
        key_service: Optional[IKeyService] = None,
    ):
        self.settings = settings or config
        if network is None:
            network = self.settings.network_config()
        elif isinstance(network, str):
            network = network_from_name(network)
        self.network = network
        self.transport = transport or create_transport(network)
        self.key_service = key_service or StellarKeyService()

    @property
    def simulated(self) -> bool:
        return isinstance(self.network, SimulatedNetwork)

    def new_tx(self) -> Tx:
        return Tx(
            transport=self.transport,
            key_service=self.key_service,
            network_passphrase=self.network.passphrase,
            base_fee=self.settings.base_fee,
            timeout=self.settings.tx_timeout,
        )

    def _run(self, source: Source, signers, *mutators: Mutator) -> Optional[LedgerError]:
        identifier = resolve_source(source, signers)
        tx = self.new_tx()
        tx.build(identifier, *mutators)
        tx.sign(*signing_seeds(identifier, signers))
        tx.submit()
        return tx.err

    def create_keypair(self) -> KeyPair:
        return self.key_service.generate_keypair()

    def load_account(self, address: str) -> Account:
        """Raises NotFoundError for unknown addresses, SubmitError when the network fails."""
        return self.new_tx().client.load_account(address)

    def fund_account(self, source: Source, address: str, amount: str,
                     *signers: SignerSeed) -> Optional[LedgerError]:
        """Create the account at address, funding it with amount lumens from source."""
        return self._run(source, signers, CreateAccountOp(destination=address, starting_balance=amount))

    def pay_native(self, source: Source, target_address: str, amount: str,
                   *signers: SignerSeed) -> Optional[LedgerError]:
        return self.pay(Payment(source=source, target_address=target_address, amount=amount,
                                signer_seeds=tuple(signers)))

    def pay(self, payment: Payment) -> Optional[LedgerError]:
        mutators: List[Mutator] = []
        if payment.memo.type != MemoType.NONE:
            mutators.append(payment.memo)

        if payment.asset.is_native:
            mutators.append(NativePaymentOp(destination=payment.target_address, amount=payment.amount))
        else:
            mutators.append(CreditPaymentOp(destination=payment.target_address, code=payment.asset.code,
                                            issuer=payment.asset.issuer, amount=payment.amount))

        logger.info(f"paying {payment.amount} {payment.asset.to_string()} to {payment.target_address}")
        return self._run(payment.source, payment.signer_seeds, *mutators)

    def create_trust_line(self, source: Source, asset: Asset, limit: str,
                          *signers: SignerSeed) -> Optional[LedgerError]:
        """Trust asset from source. An empty limit means no limit."""
        return self._run(source, signers, TrustOp(code=asset.code, issuer=asset.issuer, limit=limit or None))

    def remove_trust_line(self, source: Source, asset: Asset, *signers: SignerSeed) -> Optional[LedgerError]:
        return self._run(source, signers, RemoveTrustOp(code=asset.code, issuer=asset.issuer))

    def set_master_weight(self, source: Source, weight: int, *signers: SignerSeed) -> Optional[LedgerError]:
        return self._run(source, signers, MasterWeightOp(weight=weight))

    def add_signer(self, source: Source, signer_address: str, signer_weight: int,
                   *signers: SignerSeed) -> Optional[LedgerError]:
        return self._run(source, signers, AddSignerOp(address=signer_address, weight=signer_weight))

    def remove_signer(self, source: Source, signer_address: str, *signers: SignerSeed) -> Optional[LedgerError]:
        return self._run(source, signers, RemoveSignerOp(address=signer_address))

    def set_thresholds(self, source: Source, low: int, medium: int, high: int,
                       *signers: SignerSeed) -> Optional[LedgerError]:
        return self._run(source, signers, ThresholdsOp(low=low, medium=medium, high=high))
