"""Custom exceptions for usdc-addresses."""

from .chains import NamedChain


class UsdcLookupError(Exception):
    """Base exception for usdc-addresses."""


class UnsupportedChainError(UsdcLookupError):
    """No USDC address is known for the chain."""

    def __init__(self, chain: NamedChain | int) -> None:
        super().__init__(f"USDC address not available for chain: {chain!r}")
        self.chain = chain


class AddressParseError(UsdcLookupError):
    """
    A stored USDC address string is not a valid 20-byte hex address.

    Points at a bad entry in the address table, not at the caller.
    The underlying parse error is available as ``source`` and ``__cause__``.
    """

    def __init__(self, address_str: str, chain: NamedChain, source: Exception) -> None:
        super().__init__(f"Failed to parse address string '{address_str}': {source}")
        self.address_str = address_str
        self.chain = chain
        self.source = source
