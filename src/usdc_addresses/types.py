"""Type definitions for usdc-addresses."""

from eth_typing import ChecksumAddress
from pydantic import BaseModel

from .chains import NamedChain


class UsdcDeployment(BaseModel):
    """
    A USDC contract on one chain.

    Example:
        UsdcDeployment(chain=NamedChain.BASE, address="0x8335...2913")
    """

    chain: NamedChain
    address: ChecksumAddress

    model_config = {"frozen": True}
