"""Sales statistics bounded context."""

from .sales import SalesStatistics, SalesSummary

__all__ = ["SalesStatistics", "SalesSummary"]
