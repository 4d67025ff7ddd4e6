import pytest

from solid_principles.domain.core.exceptions import ValidationError
from solid_principles.domain.statistics.sales import SalesStatistics, SalesSummary


def test_compute_sales_statistics():
    summary = SalesStatistics().compute_sales_statistics([10, 20, 30])

    assert summary == SalesSummary(count=3, total=60.0, average=20.0)


def test_no_sales_yields_zeros():
    summary = SalesStatistics().compute_sales_statistics([])

    assert summary.count == 0
    assert summary.total == 0.0
    assert summary.average == 0.0


def test_accepts_any_iterable():
    summary = SalesStatistics().compute_sales_statistics(x for x in (1.5, 2.5))

    assert summary.count == 2
    assert summary.average == 2.0


def test_negative_sales_are_rejected():
    with pytest.raises(ValidationError) as exc_info:
        SalesStatistics().compute_sales_statistics([5, -1, -2])

    assert exc_info.value.details == {"negative": [-1, -2]}
