# Suppress websockets deprecation warning from web3.py (ethereum/web3.py#3530)
# web3.py unconditionally imports LegacyWebSocketProvider even for HTTP-only usage.
# This will be fixed in web3.py v8. Remove this filter after upgrading.
import warnings

warnings.filterwarnings(
    "ignore",
    message="websockets.legacy is deprecated",
    category=DeprecationWarning,
    module=r"websockets\.legacy",
)

"""
USDC contract addresses for EVM chains.

Usage:
    from usdc_addresses import NamedChain, UnsupportedChainError, get_usdc_address

    get_usdc_address(NamedChain.MAINNET)
    # '0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48'

    NamedChain.POLYGON.usdc_address()
    # '0x3c499c542cEF5E3811e1192ce70d8cC03d5c3359'

    try:
        get_usdc_address(12345)
    except UnsupportedChainError as e:
        print(e.chain)  # 12345
"""

from ._exceptions import (
    AddressParseError,
    UnsupportedChainError,
    UsdcLookupError,
)
from ._version import __version__

# Chains
from .chains import NamedChain

# Constants
from .constants import (
    ARBITRUM_SEPOLIA_USDC,
    ARBITRUM_USDC,
    AVALANCHE_USDC,
    BASE_SEPOLIA_USDC,
    BASE_USDC,
    BSC_USDC,
    ETHEREUM_SEPOLIA_USDC,
    ETHEREUM_USDC,
    FANTOM_USDC,
    FRAXTAL_USDC,
    LINEA_USDC,
    MANTLE_USDC,
    MODE_USDC,
    OPTIMISM_USDC,
    POLYGON_USDC,
    SCROLL_USDC,
    SONIC_USDC,
    SUPPORTED_CHAINS,
    USDC_ADDRESSES,
    ZKSYNC_USDC,
)

# Resolution
from .resolver import (
    Usdc,
    get_usdc_address,
    is_supported_chain,
    to_named_chain,
    usdc_deployments,
)

# Types
from .types import UsdcDeployment

__all__ = [
    # Version
    "__version__",
    # Chains
    "NamedChain",
    # Resolution
    "Usdc",
    "get_usdc_address",
    "is_supported_chain",
    "to_named_chain",
    "usdc_deployments",
    # Types
    "UsdcDeployment",
    # Constants
    "USDC_ADDRESSES",
    "SUPPORTED_CHAINS",
    "ARBITRUM_USDC",
    "ARBITRUM_SEPOLIA_USDC",
    "AVALANCHE_USDC",
    "BASE_USDC",
    "BASE_SEPOLIA_USDC",
    "BSC_USDC",
    "ETHEREUM_USDC",
    "ETHEREUM_SEPOLIA_USDC",
    "FANTOM_USDC",
    "FRAXTAL_USDC",
    "LINEA_USDC",
    "MANTLE_USDC",
    "MODE_USDC",
    "OPTIMISM_USDC",
    "POLYGON_USDC",
    "SCROLL_USDC",
    "SONIC_USDC",
    "ZKSYNC_USDC",
    # Exceptions
    "UsdcLookupError",
    "UnsupportedChainError",
    "AddressParseError",
]
