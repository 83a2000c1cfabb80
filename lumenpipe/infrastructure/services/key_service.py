from stellar_sdk import DecoratedSignature, Keypair

from lumenpipe.core.domain.value_objects import KeyPair
from lumenpipe.core.interfaces.services import IKeyService


class StellarKeyService(IKeyService):
    def generate_keypair(self) -> KeyPair:
        keypair = Keypair.random()
        return KeyPair(address=keypair.public_key, seed=keypair.secret)

    def derive_address(self, seed: str) -> str:
        return Keypair.from_secret(seed).public_key

    def sign(self, seed: str, payload: bytes) -> DecoratedSignature:
        return Keypair.from_secret(seed).sign_decorated(payload)
