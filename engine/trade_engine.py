"""Trade engine.

Applies buys and sells to an in-memory portfolio with linear scans by symbol.
A sell that cannot be filled never raises; it returns a rejected
``TradeResult`` and leaves the portfolio untouched.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from portfolio.holding import Holding
from portfolio.portfolio import Portfolio

logger = logging.getLogger(__name__)


class TradeStatus(Enum):
    """Outcome of a trade request."""

    FILLED = "filled"
    INSUFFICIENT_SHARES = "insufficient_shares"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class TradeResult:
    """Result of a buy or sell against a portfolio."""

    action: str  # BUY/SELL
    symbol: str
    quantity: int
    price: Optional[float]
    status: TradeStatus
    message: str

    @property
    def ok(self) -> bool:
        return self.status is TradeStatus.FILLED

    def __str__(self) -> str:
        """Format result for display."""
        return self.message


def format_number(value: float) -> str:
    """Render a number with up to six significant digits and no trailing zeros."""
    return f"{value:g}"


def compute_total_value(portfolio: Portfolio) -> float:
    return portfolio.total_value()


def buy(portfolio: Portfolio, symbol: str, price: float, quantity: int) -> TradeResult:
    """Add shares of ``symbol``, overwriting its price with the latest one."""
    holding = portfolio.find(symbol)
    if holding is not None:
        holding.quantity += quantity
        holding.price = price
    else:
        portfolio.holdings.append(Holding(symbol=symbol, price=price, quantity=quantity))

    logger.debug("BUY %s x%s @ %s", symbol, quantity, price)
    return TradeResult(
        action="BUY",
        symbol=symbol,
        quantity=quantity,
        price=price,
        status=TradeStatus.FILLED,
        message=f"Bought {quantity} shares of {symbol} at ${format_number(price)}.",
    )


def sell(portfolio: Portfolio, symbol: str, quantity: int) -> TradeResult:
    """Remove shares of ``symbol``; the holding is dropped once it reaches zero."""
    holding = portfolio.find(symbol)
    if holding is None:
        logger.info("Sell rejected: %s not held", symbol)
        return TradeResult(
            "SELL", symbol, quantity, None, TradeStatus.NOT_FOUND,
            f"Stock {symbol} not found in portfolio.",
        )

    if holding.quantity < quantity:
        logger.info("Sell rejected: %s holds %s, requested %s", symbol, holding.quantity, quantity)
        return TradeResult(
            "SELL", symbol, quantity, None, TradeStatus.INSUFFICIENT_SHARES,
            f"Not enough shares of {symbol} to sell.",
        )

    holding.quantity -= quantity
    if holding.quantity == 0:
        portfolio.holdings.remove(holding)
        logger.debug("Position %s closed", symbol)

    logger.debug("SELL %s x%s", symbol, quantity)
    return TradeResult(
        "SELL", symbol, quantity, None, TradeStatus.FILLED,
        f"Sold {quantity} shares of {symbol}.",
    )
