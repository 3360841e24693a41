from __future__ import annotations
from typing import Dict, Any
import pandas as pd
from portfolio.portfolio import Portfolio

HOLDING_COLUMNS = ["symbol", "price", "quantity", "market_value", "weight"]

def portfolio_summary(portfolio: Portfolio) -> Dict[str, Any]:
    return {
        "total_value": portfolio.total_value(),
        "holdings": len(portfolio),
        "weights": portfolio.current_weights(),
    }

def holdings_frame(portfolio: Portfolio) -> pd.DataFrame:
    weights = portfolio.current_weights()
    rows = [
        {
            "symbol": h.symbol,
            "price": float(h.price),
            "quantity": int(h.quantity),
            "market_value": h.market_value,
            "weight": weights.get(h.symbol, 0.0),
        }
        for h in portfolio
    ]
    return pd.DataFrame(rows, columns=HOLDING_COLUMNS)
