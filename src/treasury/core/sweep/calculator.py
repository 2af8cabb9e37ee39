"""Sweep amount calculation.

Pure integer arithmetic on wei values: the transferable amount is the
balance minus ``gas_price * gas_limit``. No floating point is involved, so
``amount_to_send + gas_cost == balance`` holds exactly for every sweepable
quote.
"""

from treasury.constants.sweep import GAS_LIMIT
from treasury.models.sweep import SweepDecision, SweepQuote


def _require_wei(name: str, value: int) -> None:
    # bool is an int subclass but never a wei amount
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer amount of wei, got {value!r}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def calculate_sweep(balance: int, gas_price: int, gas_limit: int = GAS_LIMIT) -> SweepQuote:
    """Compute how much of ``balance`` can be swept after paying for gas.

    Args:
        balance: Wallet balance in wei.
        gas_price: Gas price in wei per unit of gas.
        gas_limit: Gas units reserved for the transfer (21000 for plain ETH).

    Returns:
        SweepQuote tagged INSUFFICIENT_BALANCE when the balance cannot cover
        gas (amount reported as 0), ZERO_AMOUNT when it covers gas exactly,
        and SWEEPABLE otherwise.

    Raises:
        ValueError: If any input is negative or not an integer.

    Example:
        >>> calculate_sweep(10**18, 20 * 10**9).amount_to_send
        999580000000000000
    """
    _require_wei("balance", balance)
    _require_wei("gas_price", gas_price)
    _require_wei("gas_limit", gas_limit)

    gas_cost = gas_price * gas_limit

    if balance < gas_cost:
        decision = SweepDecision.INSUFFICIENT_BALANCE
        amount_to_send = 0
    elif balance == gas_cost:
        decision = SweepDecision.ZERO_AMOUNT
        amount_to_send = 0
    else:
        decision = SweepDecision.SWEEPABLE
        amount_to_send = balance - gas_cost

    return SweepQuote(
        balance=balance,
        gas_price=gas_price,
        gas_limit=gas_limit,
        gas_cost=gas_cost,
        amount_to_send=amount_to_send,
        decision=decision,
    )
