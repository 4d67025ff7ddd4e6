"""Sales statistics - a class with exactly one responsibility."""

from typing import Iterable

from pydantic import BaseModel, ConfigDict

from solid_principles.domain.core.exceptions import ValidationError


class SalesSummary(BaseModel):
    """Aggregate figures for a batch of sales."""
    model_config = ConfigDict(frozen=True)

    count: int = 0
    total: float = 0.0
    average: float = 0.0


class SalesStatistics:
    """Computes sales statistics and nothing else."""

    def compute_sales_statistics(self, sales: Iterable[float]) -> SalesSummary:
        """
        Compute count, total and average for the given sale amounts.

        Args:
            sales: Non-negative sale amounts

        Returns:
            SalesSummary; all zeros when there are no sales

        Raises:
            ValidationError: If any amount is negative
        """
        amounts = list(sales)
        negative = [amount for amount in amounts if amount < 0]
        if negative:
            raise ValidationError(
                "Sale amounts must be non-negative", {"negative": negative}
            )
        if not amounts:
            return SalesSummary()

        total = float(sum(amounts))
        return SalesSummary(count=len(amounts), total=total, average=total / len(amounts))
