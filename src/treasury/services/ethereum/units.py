"""Ether display helpers."""

from decimal import Decimal, localcontext

from web3 import Web3


def format_ether(wei: int) -> str:
    """Format a wei amount as an ether string.

    Always keeps at least one decimal place and never rounds.

    Example:
        >>> format_ether(10**18)
        '1.0'
        >>> format_ether(999580000000000000)
        '0.99958'
    """
    with localcontext() as ctx:
        # normalize() rounds to the context precision
        ctx.prec = 999
        # from_wei returns a plain int 0 for zero
        ether = Decimal(Web3.from_wei(wei, "ether")).normalize()
    text = format(ether, "f")
    return text if "." in text else f"{text}.0"
