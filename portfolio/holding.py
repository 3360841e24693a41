from __future__ import annotations
from dataclasses import dataclass

@dataclass
class Holding:
    symbol: str
    price: float  # latest buy price per share
    quantity: int

    @property
    def market_value(self) -> float:
        return self.price * self.quantity
