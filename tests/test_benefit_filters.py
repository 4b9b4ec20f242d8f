from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from marketplace.modules.benefits import BenefitFilter, BenefitService
from marketplace.modules.benefits.filters import parse_price_bound
from marketplace.modules.common import InvalidInputError


class TestParsePriceBound:
    def test_absent_or_blank(self):
        assert parse_price_bound(None, "min_price") is None
        assert parse_price_bound("  ", "min_price") is None

    def test_decimal_text(self):
        assert parse_price_bound("12.5", "min_price") == Decimal("12.5")

    @pytest.mark.parametrize("value", ["abc", "-1", "NaN", "Infinity", "1e"])
    def test_rejects_malformed(self, value):
        with pytest.raises(InvalidInputError, match="min_price"):
            parse_price_bound(value, "min_price")


class TestBenefitFilter:
    def test_empty_criteria(self):
        criteria = BenefitFilter.parse(category="", min_price=None, max_price=" ", search=None)
        assert criteria.is_empty
        assert criteria.clauses() == []

    def test_both_bounds_are_kept(self):
        criteria = BenefitFilter.parse(min_price="10", max_price="50")
        assert criteria.min_price == Decimal("10")
        assert criteria.max_price == Decimal("50")
        assert len(criteria.clauses()) == 2

    def test_inverted_range(self):
        with pytest.raises(InvalidInputError):
            BenefitFilter.parse(min_price="50", max_price="10")

    def test_text_criteria_are_trimmed(self):
        criteria = BenefitFilter.parse(category=" trans ", search=" Pass")
        assert criteria.category == "trans"
        assert criteria.search == "Pass"
        assert len(criteria.clauses()) == 2


@pytest.mark.asyncio
class TestFilterRejectedBeforeStore:
    async def test_repository_untouched_on_bad_bound(self):
        repository = AsyncMock()
        service = BenefitService(repository)

        with pytest.raises(InvalidInputError):
            await service.list_benefits(BenefitFilter.parse(min_price="cheap"))

        repository.list_all.assert_not_called()
        repository.list_filtered.assert_not_called()

    async def test_empty_criteria_lists_everything(self):
        repository = AsyncMock()
        repository.list_all.return_value = []
        service = BenefitService(repository)

        assert await service.list_benefits(BenefitFilter()) == []
        repository.list_all.assert_awaited_once()
        repository.list_filtered.assert_not_called()
