"""
Cost statistics collected by the ordered symbol tables.

The cost of a put is measured in key compares. Sedgewick & Wayne
(Algorithms, 4th edition, 2011) give ~1.39 lg N as the average cost of a
search hit in a BST built from N random keys.
"""

from dataclasses import dataclass, field

import numpy as np


@dataclass(frozen=True)
class SymbolTableStatistics:
    average_put_cost: float = 0.0

    @classmethod
    def from_counts(cls, compares_put: int, total_puts: int) -> "SymbolTableStatistics":
        """
        The average cost of a put operation is 1 + the total number of
        compares done during puts divided by the total number of puts.
        """
        if total_puts <= 0:
            return cls(0.0)
        return cls(1.0 + compares_put / total_puts)


def theoretical_put_cost(n: int) -> float:
    """Expected compares for a random BST of n keys: ~1.39 lg n."""
    if n <= 1:
        return 0.0
    return float(2 * np.log(n))


@dataclass
class CostTrace:
    """
    Records the compares made by each put, as in the book's amortized cost
    plots: one point per operation and the running average.
    """

    costs: list[int] = field(default_factory=list)

    def record(self, compares: int) -> None:
        self.costs.append(compares)

    def __len__(self) -> int:
        return len(self.costs)

    def as_array(self) -> np.ndarray:
        return np.asarray(self.costs, dtype=np.int64)

    def running_average(self) -> np.ndarray:
        """Cumulative average cost after each put."""
        if not self.costs:
            return np.zeros(0, dtype=np.float64)
        costs = self.as_array()
        return np.cumsum(costs) / np.arange(1, len(costs) + 1)

    def total(self) -> int:
        return int(self.as_array().sum())
