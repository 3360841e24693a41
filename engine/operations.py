"""Named portfolio operations.

Every entry in ``OPERATIONS`` takes ``(portfolio, symbol, price, quantity)``
so callers can dispatch on a command name alone.
"""
from __future__ import annotations

from typing import Callable, Dict

from engine.trade_engine import TradeResult, buy, sell
from portfolio.portfolio import Portfolio

Operation = Callable[[Portfolio, str, float, int], TradeResult]


class OperationError(Exception):
    """Error raised when an unknown operation name is dispatched."""

    pass


def _sell(portfolio: Portfolio, symbol: str, price: float, quantity: int) -> TradeResult:
    # price is ignored for sells
    return sell(portfolio, symbol, quantity)


OPERATIONS: Dict[str, Operation] = {
    "buy": buy,
    "sell": _sell,
}


def get_operation(name: str) -> Operation:
    try:
        return OPERATIONS[name]
    except KeyError:
        raise OperationError(
            f"Unknown operation '{name}'. Available: {', '.join(sorted(OPERATIONS))}"
        ) from None


def execute(
    name: str,
    portfolio: Portfolio,
    symbol: str,
    price: float = 0.0,
    quantity: int = 0,
    out: Callable[[str], None] = print,
) -> TradeResult:
    """Run the named operation and emit its console message."""
    result = get_operation(name)(portfolio, symbol, price, quantity)
    out(result.message)
    return result
