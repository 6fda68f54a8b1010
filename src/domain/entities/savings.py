"""Domain entities describing rainwater harvesting results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict


@dataclass(slots=True)
class SavingsReport:
    """Collected water and money saved for one location and date range."""

    monthly_water_collected: Dict[str, float] = field(default_factory=dict)
    total_water_collected: float = 0.0
    money_saved: float = 0.0
    water_cost_per_1000_litres: float = 0.0
    formula: str = ""

    @property
    def months(self) -> int:
        return len(self.monthly_water_collected)
