"""Known Stellar networks and their default Horizon endpoints."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Network:
    passphrase: str
    horizon_url: str | None = None


PUBLIC = Network(
    "Public Global Stellar Network ; September 2015",
    "https://horizon.stellar.org",
)
TESTNET = Network(
    "Test SDF Network ; September 2015",
    "https://horizon-testnet.stellar.org",
)
FUTURENET = Network(
    "Test SDF Future Network ; October 2022",
    "https://horizon-futurenet.stellar.org",
)

KNOWN_NETWORKS = (PUBLIC, TESTNET, FUTURENET)


def network_for_passphrase(passphrase: str) -> Network:
    """Return the known network for a passphrase, or a custom one without a Horizon default."""
    for network in KNOWN_NETWORKS:
        if network.passphrase == passphrase:
            return network
    return Network(passphrase)


__all__ = ['Network', 'PUBLIC', 'TESTNET', 'FUTURENET', 'KNOWN_NETWORKS', 'network_for_passphrase']
