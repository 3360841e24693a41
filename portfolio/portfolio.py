from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional
from portfolio.holding import Holding

@dataclass
class Portfolio:
    holdings: List[Holding] = field(default_factory=list)  # first-buy order, unique by symbol

    def __iter__(self) -> Iterator[Holding]:
        return iter(self.holdings)

    def __len__(self) -> int:
        return len(self.holdings)

    def find(self, symbol: str) -> Optional[Holding]:
        for h in self.holdings:
            if h.symbol == symbol:
                return h
        return None

    def symbols(self) -> List[str]:
        return [h.symbol for h in self.holdings]

    def total_value(self) -> float:
        return sum((h.market_value for h in self.holdings), 0.0)

    def current_weights(self) -> Dict[str, float]:
        total = self.total_value()
        if total <= 0:
            return {h.symbol: 0.0 for h in self.holdings}
        return {h.symbol: h.market_value / total for h in self.holdings}
