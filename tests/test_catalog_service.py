"""
Tests for the catalog reader and the pizza of the day.
"""

from datetime import datetime, timedelta, timezone

import pytest

from app.exceptions import EmptyCatalogError
from app.models.pizza import PizzaType
from app.services.catalog_service import (
    days_since_epoch,
    get_pizza_of_the_day,
    list_pizzas,
    select_daily_pick,
)


def make_catalog(size):
    return [
        PizzaType(pizza_type_id=str(i), name=f"Pizza {i}", category="Classic")
        for i in range(size)
    ]


class TestDaysSinceEpoch:
    """Tests for the UTC day counter."""

    def test_epoch_is_day_zero(self):
        assert days_since_epoch(datetime(1970, 1, 1, tzinfo=timezone.utc)) == 0

    def test_stable_within_a_utc_day(self):
        """Test that every instant of one UTC day maps to the same count."""
        start = datetime(2024, 3, 15, 0, 0, 0, tzinfo=timezone.utc)
        end = datetime(2024, 3, 15, 23, 59, 59, 999999, tzinfo=timezone.utc)

        assert days_since_epoch(start) == days_since_epoch(end)

    def test_uses_utc_not_local_offset(self):
        """Test that an aware non-UTC time is counted on its UTC date."""
        late_in_new_york = datetime(2024, 3, 15, 22, 0, tzinfo=timezone(timedelta(hours=-5)))
        utc_next_day = datetime(2024, 3, 16, 12, 0, tzinfo=timezone.utc)

        assert days_since_epoch(late_in_new_york) == days_since_epoch(utc_next_day)


class TestSelectDailyPick:
    """Tests for the day -> pizza rule."""

    def test_index_is_day_count_mod_catalog_size(self):
        catalog = make_catalog(5)

        assert select_daily_pick(0, catalog) is catalog[0]
        assert select_daily_pick(7, catalog) is catalog[2]
        assert select_daily_pick(19723, catalog) is catalog[19723 % 5]

    def test_advances_by_one_each_day(self):
        """Test that the pick advances by 1 mod N across day boundaries."""
        catalog = make_catalog(3)
        midnight = datetime(2024, 1, 1, tzinfo=timezone.utc)

        picks = []
        for offset in range(7):
            day = days_since_epoch(midnight + timedelta(days=offset, hours=13))
            picks.append(catalog.index(select_daily_pick(day, catalog)))

        for previous, current in zip(picks, picks[1:]):
            assert current == (previous + 1) % 3

    def test_empty_catalog_raises(self):
        with pytest.raises(EmptyCatalogError) as exc_info:
            select_daily_pick(19723, [])

        assert exc_info.value.to_dict() == {"error": "No pizzas available"}


class TestListPizzas:
    """Tests for reading the full catalog."""

    async def test_every_type_carries_its_sizes(self, store):
        pizzas = {pizza.id: pizza for pizza in await list_pizzas(store)}

        assert set(pizzas) == {"1", "2", "3", "4"}
        assert pizzas["1"].sizes == {"S": 9.75, "M": 12.5, "L": 15.25}
        assert pizzas["3"].sizes == {"M": 14.75, "L": 17.95}
        assert pizzas["1"].image == "/public/pizzas/1.webp"
        assert pizzas["2"].description == "Sliced Ham, Pineapple, Mozzarella Cheese"

    async def test_type_without_prices_has_empty_sizes(self, store):
        pizzas = {pizza.id: pizza for pizza in await list_pizzas(store)}

        assert pizzas["4"].sizes == {}

    async def test_empty_catalog_is_empty_list(self, empty_store):
        assert await list_pizzas(empty_store) == []


class TestPizzaOfTheDay:
    """Tests for the featured pizza read path."""

    async def test_same_pick_all_day(self, store):
        morning = datetime(2024, 6, 1, 0, 5, tzinfo=timezone.utc)
        evening = datetime(2024, 6, 1, 23, 55, tzinfo=timezone.utc)

        first = await get_pizza_of_the_day(store, now=morning)
        second = await get_pizza_of_the_day(store, now=evening)

        assert first == second

    async def test_pick_comes_with_its_own_sizes(self, store):
        now = datetime(2024, 6, 1, 12, tzinfo=timezone.utc)
        # catalog is ordered by id: "1", "2", "3", "4"
        expected_id = ["1", "2", "3", "4"][days_since_epoch(now) % 4]

        pizza = await get_pizza_of_the_day(store, now=now)

        assert pizza.id == expected_id
        assert pizza.image == f"/public/pizzas/{expected_id}.webp"
        if expected_id == "3":
            assert pizza.sizes == {"M": 14.75, "L": 17.95}

    async def test_next_day_moves_to_next_pizza(self, store):
        today = datetime(2024, 6, 1, 12, tzinfo=timezone.utc)
        ids = ["1", "2", "3", "4"]

        first = await get_pizza_of_the_day(store, now=today)
        second = await get_pizza_of_the_day(store, now=today + timedelta(days=1))

        assert ids.index(second.id) == (ids.index(first.id) + 1) % len(ids)

    async def test_empty_catalog_raises(self, empty_store):
        with pytest.raises(EmptyCatalogError):
            await get_pizza_of_the_day(empty_store)
