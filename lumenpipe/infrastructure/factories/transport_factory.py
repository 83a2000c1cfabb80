from lumenpipe.config_reader import LiveNetwork, NetworkConfig, SimulatedNetwork
from lumenpipe.core.interfaces.services import ILedgerTransport


def create_transport(network: NetworkConfig) -> ILedgerTransport:
    if isinstance(network, SimulatedNetwork):
        from lumenpipe.infrastructure.services.simulated_transport import SimulatedTransport
        return SimulatedTransport()
    if isinstance(network, LiveNetwork):
        from lumenpipe.infrastructure.services.horizon_transport import HorizonTransport
        return HorizonTransport(horizon_url=network.horizon_url)
    raise TypeError(f"Unsupported network configuration: {network!r}")
