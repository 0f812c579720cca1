"""Known EVM networks, keyed by EIP-155 chain ID."""

from enum import IntEnum

from eth_typing import ChecksumAddress


class NamedChain(IntEnum):
    """
    EVM networks by chain ID.

    Covers every chain with a USDC entry plus a handful of well-known networks
    that have none. Membership here does not imply USDC support; use
    is_supported_chain() for that.

    Example:
        >>> NamedChain(137)
        <NamedChain.POLYGON: 137>
        >>> NamedChain.POLYGON.usdc_address()
        '0x3c499c542cEF5E3811e1192ce70d8cC03d5c3359'
    """

    MAINNET = 1
    GOERLI = 5
    OPTIMISM = 10
    CRONOS = 25
    BINANCE_SMART_CHAIN = 56
    GNOSIS = 100
    POLYGON = 137
    SONIC = 146
    FANTOM = 250
    FRAXTAL = 252
    ZKSYNC_SEPOLIA = 300
    ZKSYNC = 324
    MOONBEAM = 1284
    MANTLE = 5000
    BASE = 8453
    HOLESKY = 17000
    MODE = 34443
    ARBITRUM = 42161
    CELO = 42220
    AVALANCHE_FUJI = 43113
    AVALANCHE = 43114
    LINEA = 59144
    POLYGON_AMOY = 80002
    BLAST = 81457
    BASE_SEPOLIA = 84532
    ARBITRUM_SEPOLIA = 421614
    SCROLL = 534352
    SEPOLIA = 11155111
    OPTIMISM_SEPOLIA = 11155420

    def usdc_address(self) -> ChecksumAddress:
        """
        Get the USDC contract address on this chain.

        Raises:
            UnsupportedChainError: If no USDC address is known for this chain
            AddressParseError: If the stored address is malformed
        """
        # resolver imports constants, which imports this module
        from .resolver import get_usdc_address

        return get_usdc_address(self)
