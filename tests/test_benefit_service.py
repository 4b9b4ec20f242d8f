import uuid
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from marketplace.modules.benefits import BenefitCategory, BenefitFilter, BenefitInput, BenefitService
from marketplace.modules.common import InvalidInputError, NotFoundError


def payload(**overrides) -> BenefitInput:
    values = dict(
        name="Gym membership",
        category=BenefitCategory.HEALTH,
        price=Decimal("45"),
        expiration_date=datetime(2030, 1, 1, tzinfo=timezone.utc),
        description="Access to partner gyms",
        in_stock=5,
    )
    values.update(overrides)
    return BenefitInput(**values)


@pytest.mark.asyncio
class TestBenefitService:
    async def test_add_and_get(self, database):
        async with database.session() as db:
            created = await BenefitService.with_session(db).add_benefit(payload())
        async with database.session() as db:
            fetched = await BenefitService.with_session(db).get_benefit(created.id)

        assert fetched.name == "Gym membership"
        assert fetched.category is BenefitCategory.HEALTH
        assert fetched.price == Decimal("45")
        assert fetched.in_stock == 5
        assert fetched.expiration_date == datetime(2030, 1, 1, tzinfo=timezone.utc)

    @pytest.mark.parametrize(
        "overrides",
        [{"name": "  "}, {"price": Decimal("-1")}, {"in_stock": -3}, {"category": "Food"}],
    )
    async def test_add_rejects_invalid_payload(self, database, overrides):
        async with database.session() as db:
            with pytest.raises(InvalidInputError):
                await BenefitService.with_session(db).add_benefit(payload(**overrides))

    async def test_get_missing_and_malformed(self, database):
        async with database.session() as db:
            service = BenefitService.with_session(db)
            with pytest.raises(NotFoundError):
                await service.get_benefit(str(uuid.uuid4()))
            with pytest.raises(InvalidInputError):
                await service.get_benefit("benefit-1")

    async def test_update_replaces_fields(self, database, make_benefit):
        benefit = await make_benefit()

        async with database.session() as db:
            updated = await BenefitService.with_session(db).update_benefit(
                benefit.id, payload(name="Yoga classes", price=Decimal("20")), body_id=benefit.id
            )

        assert updated.id == benefit.id
        assert updated.name == "Yoga classes"
        assert updated.price == Decimal("20")

    async def test_update_with_mismatched_body_id(self, database, make_benefit):
        benefit = await make_benefit()

        async with database.session() as db:
            with pytest.raises(InvalidInputError, match="does not match"):
                await BenefitService.with_session(db).update_benefit(
                    benefit.id, payload(), body_id=str(uuid.uuid4())
                )

    async def test_update_missing(self, database):
        async with database.session() as db:
            with pytest.raises(NotFoundError):
                await BenefitService.with_session(db).update_benefit(str(uuid.uuid4()), payload())

    async def test_delete(self, database, make_benefit):
        benefit = await make_benefit()

        async with database.session() as db:
            await BenefitService.with_session(db).delete_benefit(benefit.id)
        async with database.session() as db:
            service = BenefitService.with_session(db)
            with pytest.raises(NotFoundError):
                await service.get_benefit(benefit.id)
            with pytest.raises(NotFoundError):
                await service.delete_benefit(benefit.id)


@pytest.mark.asyncio
class TestBenefitListing:
    @pytest.fixture
    def catalog(self, make_benefit):
        async def _seed():
            return {
                "metro": await make_benefit(name="Metro pass", category=BenefitCategory.TRANSPORT, price="60"),
                "bike": await make_benefit(name="Bike share", category=BenefitCategory.TRANSPORT, price="15"),
                "gym": await make_benefit(name="Gym PASS", category=BenefitCategory.HEALTH, price="45"),
                "cinema": await make_benefit(name="Cinema 100% fun", category=BenefitCategory.ENTERTAINMENT, price="12"),
            }

        return _seed

    async def list_names(self, database, **criteria):
        async with database.session() as db:
            benefits = await BenefitService.with_session(db).list_benefits(BenefitFilter.parse(**criteria))
        return sorted(benefit.name for benefit in benefits)

    async def test_no_criteria_lists_all(self, database, catalog):
        await catalog()
        assert len(await self.list_names(database)) == 4

    async def test_category_substring_is_case_insensitive(self, database, catalog):
        await catalog()
        assert await self.list_names(database, category="trans") == ["Bike share", "Metro pass"]

    async def test_both_price_bounds_apply(self, database, catalog):
        await catalog()
        assert await self.list_names(database, min_price="13", max_price="50") == ["Bike share", "Gym PASS"]

    async def test_ten_to_twenty_range(self, database, catalog):
        await catalog()
        assert await self.list_names(database, min_price="10", max_price="20") == ["Bike share", "Cinema 100% fun"]

    async def test_bounds_are_inclusive(self, database, catalog):
        await catalog()
        assert await self.list_names(database, min_price="15", max_price="15") == ["Bike share"]

    async def test_search_matches_name_case_insensitively(self, database, catalog):
        await catalog()
        assert await self.list_names(database, search="pass") == ["Gym PASS", "Metro pass"]

    async def test_criteria_are_combined(self, database, catalog):
        await catalog()
        assert await self.list_names(database, category="transport", search="pass", max_price="100") == ["Metro pass"]

    async def test_wildcards_in_search_are_literal(self, database, catalog):
        await catalog()
        assert await self.list_names(database, search="100%") == ["Cinema 100% fun"]
        assert await self.list_names(database, search="%") == ["Cinema 100% fun"]
