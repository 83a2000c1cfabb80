from dataclasses import dataclass
from typing import Optional, Union

from pydantic_settings import BaseSettings, SettingsConfigDict
from stellar_sdk import Network

horizon_urls = {
    'test': 'https://horizon-testnet.stellar.org',
    'public': 'https://horizon.stellar.org',
}

network_passphrases = {
    'test': Network.TESTNET_NETWORK_PASSPHRASE,
    'public': Network.PUBLIC_NETWORK_PASSPHRASE,
}


@dataclass(frozen=True)
class LiveNetwork:
    horizon_url: str
    passphrase: str


@dataclass(frozen=True)
class SimulatedNetwork:
    passphrase: str = Network.TESTNET_NETWORK_PASSPHRASE


NetworkConfig = Union[LiveNetwork, SimulatedNetwork]


def network_from_name(name: str, horizon_url: Optional[str] = None,
                      passphrase: Optional[str] = None) -> NetworkConfig:
    """Map "test", "public" or "fake" to a network configuration."""
    if name == 'fake':
        return SimulatedNetwork(passphrase=passphrase or Network.TESTNET_NETWORK_PASSPHRASE)
    if name in horizon_urls:
        return LiveNetwork(horizon_url=horizon_url or horizon_urls[name],
                           passphrase=passphrase or network_passphrases[name])
    if horizon_url and passphrase:
        return LiveNetwork(horizon_url=horizon_url, passphrase=passphrase)
    raise ValueError(f"Unknown network {name!r}: use 'test', 'public', 'fake' or give horizon_url and passphrase")


class Settings(BaseSettings):
    network: str = 'test'
    horizon_url: Optional[str] = None
    network_passphrase: Optional[str] = None
    base_fee: int = 100
    tx_timeout: int = 180

    model_config = SettingsConfigDict(
        env_prefix='LUMENPIPE_',
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore',
        case_sensitive=False,
    )

    def network_config(self) -> NetworkConfig:
        return network_from_name(self.network, self.horizon_url, self.network_passphrase)


config = Settings()
