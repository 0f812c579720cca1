"""USDC contract addresses per chain."""

from .chains import NamedChain

# Native Circle USDC unless noted. Casing is kept as published by each
# chain's explorer; the resolver normalizes to EIP-55.
ETHEREUM_USDC = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"
ETHEREUM_SEPOLIA_USDC = "0x1c7D4B196Cb0C7B01d743Fbc6116a902379C7238"
ARBITRUM_USDC = "0xaf88d065e77c8cC2239327C5EDb3A432268e5831"
ARBITRUM_SEPOLIA_USDC = "0x75faf114eafb1BDbe2F0316DF893fd58CE46AA4d"
AVALANCHE_USDC = "0xb97ef9ef8734c71904d8002f8b6bc66dd9c48a6e"
BASE_USDC = "0x833589fCD6eDb6E08f4c7C32D4f71b54bdA02913"
BASE_SEPOLIA_USDC = "0x036CbD53842c5426634e7929541eC2318f3dCF7e"
BSC_USDC = "0x8AC76a51cc950d9822D68b83fE1Ad97B32Cd580d"  # Binance-Peg
FANTOM_USDC = "0x04068da6c83afcfa0e13ba15a6696662335d5b75"  # bridged
FRAXTAL_USDC = "0xDcc0F2D8F90FDe85b10aC1c8Ab57dc0AE946A543"  # bridged
LINEA_USDC = "0x176211869cA2b568f2A7D4EE941E073a821EE1ff"
MANTLE_USDC = "0x09Bc4E0D864854c6aFB6eB9A9cdF58aC190D0dF9"
MODE_USDC = "0xd988097fb8612cc24eeC14542bC03424c656005f"
OPTIMISM_USDC = "0x0b2C639c533813f4Aa9D7837CAf62653d097Ff85"
POLYGON_USDC = "0x3c499c542cEF5E3811e1192ce70d8cC03d5c3359"
SCROLL_USDC = "0x06eFdBFf2a14a7c8E15944D1F4A48F9F95F663A4"
SONIC_USDC = "0x29219dd400f2Bf60E5a23d13Be72B486D4038894"
ZKSYNC_USDC = "0x1d17CBcF0D6D143135aE902365D2E5e2A16538D4"

USDC_ADDRESSES: dict[NamedChain, str] = {
    NamedChain.MAINNET: ETHEREUM_USDC,
    NamedChain.SEPOLIA: ETHEREUM_SEPOLIA_USDC,
    NamedChain.ARBITRUM: ARBITRUM_USDC,
    NamedChain.ARBITRUM_SEPOLIA: ARBITRUM_SEPOLIA_USDC,
    NamedChain.AVALANCHE: AVALANCHE_USDC,
    NamedChain.BASE: BASE_USDC,
    NamedChain.BASE_SEPOLIA: BASE_SEPOLIA_USDC,
    NamedChain.BINANCE_SMART_CHAIN: BSC_USDC,
    NamedChain.FANTOM: FANTOM_USDC,
    NamedChain.FRAXTAL: FRAXTAL_USDC,
    NamedChain.LINEA: LINEA_USDC,
    NamedChain.MANTLE: MANTLE_USDC,
    NamedChain.MODE: MODE_USDC,
    NamedChain.OPTIMISM: OPTIMISM_USDC,
    NamedChain.POLYGON: POLYGON_USDC,
    NamedChain.SCROLL: SCROLL_USDC,
    NamedChain.SONIC: SONIC_USDC,
    NamedChain.ZKSYNC: ZKSYNC_USDC,
}

# Supported chains
SUPPORTED_CHAINS: list[NamedChain] = list(USDC_ADDRESSES)
