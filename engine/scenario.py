"""Scenario runner.

A scenario is an ordered list of steps, each a mapping with an ``op`` of
``buy``, ``sell`` or ``print`` plus ``symbol``, ``price`` and ``quantity``
where the operation needs them. Steps run in order against one portfolio.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from engine.operations import OPERATIONS, execute
from engine.trade_engine import TradeResult
from portfolio.portfolio import Portfolio
from reporting.console import print_portfolio

logger = logging.getLogger(__name__)

PRINT_OP = "print"

# Worked example: two buys, a partial sell, then closing out XYZ.
DEMO_STEPS: List[Dict[str, Any]] = [
    {"op": "buy", "symbol": "ABC", "price": 50.0, "quantity": 10},
    {"op": "buy", "symbol": "XYZ", "price": 25.0, "quantity": 20},
    {"op": "print"},
    {"op": "sell", "symbol": "ABC", "quantity": 5},
    {"op": "print"},
    {"op": "sell", "symbol": "XYZ", "quantity": 20},
    {"op": "print"},
]


class ScenarioError(ValueError):
    """Error raised when a scenario step is malformed."""

    pass


@dataclass
class ScenarioRun:
    """Final portfolio and per-trade results of a scenario."""

    portfolio: Portfolio
    results: List[TradeResult] = field(default_factory=list)

    @property
    def rejected(self) -> List[TradeResult]:
        return [r for r in self.results if not r.ok]


def _validate_step(index: int, step: Any) -> Dict[str, Any]:
    """Normalize one step, raising ScenarioError with its index on bad input."""
    if not isinstance(step, dict):
        raise ScenarioError(f"Step {index}: expected a mapping, got {type(step).__name__}")

    op = step.get("op")
    if not op:
        raise ScenarioError(f"Step {index}: missing 'op'")
    op = str(op).lower()
    if op == PRINT_OP:
        return {"op": op}
    if op not in OPERATIONS:
        raise ScenarioError(
            f"Step {index}: unknown op '{op}' (expected one of: {', '.join(sorted(OPERATIONS))}, print)"
        )

    symbol = step.get("symbol")
    if not symbol:
        raise ScenarioError(f"Step {index}: '{op}' requires 'symbol'")

    # sells ignore price
    if op == "buy" and step.get("price") is None:
        raise ScenarioError(f"Step {index}: '{op}' requires 'price'")
    if step.get("quantity") is None:
        raise ScenarioError(f"Step {index}: '{op}' requires 'quantity'")

    raw_price = step.get("price")
    price = 0.0 if raw_price is None else _parse_price(index, raw_price)
    quantity = _parse_quantity(index, step["quantity"])
    return {"op": op, "symbol": str(symbol), "price": price, "quantity": quantity}


def _parse_price(index: int, value: Any) -> float:
    if isinstance(value, bool):
        raise ScenarioError(f"Step {index}: invalid price {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ScenarioError(f"Step {index}: invalid price {value!r}") from e


def _parse_quantity(index: int, value: Any) -> int:
    """Quantity is a whole share count; fractional values are rejected, not truncated."""
    if isinstance(value, bool):
        raise ScenarioError(f"Step {index}: invalid quantity {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ScenarioError(f"Step {index}: quantity must be a whole number, got {value!r}")
        return int(value)
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ScenarioError(f"Step {index}: invalid quantity {value!r}") from e


def run_scenario(
    steps: List[Dict[str, Any]],
    portfolio: Optional[Portfolio] = None,
    out: Callable[[str], None] = print,
) -> ScenarioRun:
    """Execute ``steps`` in order and return the resulting portfolio and trades.

    All steps are validated before any of them runs, so a malformed scenario
    never leaves a half-applied portfolio behind.

    Args:
        steps: Scenario steps.
        portfolio: Portfolio to mutate; a new empty one when omitted.
        out: Sink for console lines.

    Returns:
        ScenarioRun with the mutated portfolio and one result per buy/sell.
    """
    normalized = [_validate_step(i, s) for i, s in enumerate(steps)]
    run = ScenarioRun(portfolio=portfolio if portfolio is not None else Portfolio())

    for step in normalized:
        if step["op"] == PRINT_OP:
            print_portfolio(run.portfolio, out=out)
            continue
        result = execute(
            step["op"],
            run.portfolio,
            step["symbol"],
            step["price"],
            step["quantity"],
            out=out,
        )
        run.results.append(result)

    logger.debug(
        "Scenario finished: %d trades, %d rejected", len(run.results), len(run.rejected)
    )
    return run
