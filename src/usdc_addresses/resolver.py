"""USDC address resolution."""

from typing import Protocol, runtime_checkable

from eth_typing import ChecksumAddress
from web3 import Web3

from ._exceptions import AddressParseError, UnsupportedChainError
from .chains import NamedChain
from .constants import SUPPORTED_CHAINS, USDC_ADDRESSES
from .types import UsdcDeployment


@runtime_checkable
class Usdc(Protocol):
    """Anything that can report a USDC contract address."""

    def usdc_address(self) -> ChecksumAddress:
        """
        Return the USDC contract address.

        Raises:
            UnsupportedChainError: If no address is known
            AddressParseError: If the known address is malformed
        """
        ...


def to_named_chain(chain: NamedChain | int) -> NamedChain | int:
    """
    Map a chain ID onto its NamedChain member.

    Ints without a member, and non-int values, are returned unchanged so they
    can still be reported back to the caller.
    """
    if isinstance(chain, NamedChain):
        return chain
    if isinstance(chain, int) and not isinstance(chain, bool):
        try:
            return NamedChain(chain)
        except ValueError:
            return chain
    return chain


def get_usdc_address(chain: NamedChain | int) -> ChecksumAddress:
    """
    Get the USDC address for a given chain.

    Args:
        chain: A NamedChain or a raw chain ID

    Returns:
        The USDC contract address, EIP-55 checksummed

    Raises:
        UnsupportedChainError: If chain has no USDC entry
        AddressParseError: If the stored address fails to parse
    """
    # Only members hit the table; True and 1.0 hash like MAINNET.
    named = to_named_chain(chain)
    if not isinstance(named, NamedChain) or named not in USDC_ADDRESSES:
        raise UnsupportedChainError(named)

    address_str = USDC_ADDRESSES[named]
    try:
        return Web3.to_checksum_address(address_str)
    except (ValueError, TypeError) as e:
        raise AddressParseError(address_str, named, e) from e


def is_supported_chain(chain: NamedChain | int) -> bool:
    """Check if a chain has a USDC address."""
    named = to_named_chain(chain)
    return isinstance(named, NamedChain) and named in USDC_ADDRESSES


def usdc_deployments() -> list[UsdcDeployment]:
    """
    Resolve every supported chain.

    Raises:
        AddressParseError: On the first malformed entry
    """
    return [
        UsdcDeployment(chain=chain, address=get_usdc_address(chain))
        for chain in SUPPORTED_CHAINS
    ]
