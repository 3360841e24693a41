from __future__ import annotations
from typing import Callable, List
from engine.trade_engine import format_number
from portfolio.portfolio import Portfolio

def format_portfolio(portfolio: Portfolio) -> List[str]:
    lines = ["Current Portfolio:"]
    for h in portfolio:
        lines.append(
            f"Symbol: {h.symbol}, Price: {format_number(h.price)}, Quantity: {h.quantity}"
        )
    lines.append(f"Total Value: ${format_number(portfolio.total_value())}")
    return lines

def print_portfolio(portfolio: Portfolio, out: Callable[[str], None] = print) -> None:
    for line in format_portfolio(portfolio):
        out(line)
