import pytest
from datetime import date
from decimal import Decimal
from typing import Any, Dict

from roster.database import RosterStore, get_db
from roster.registry import Registry


@pytest.fixture(scope="function")
def db() -> RosterStore:
    """
    Fresh in-memory store for each test function.
    """
    yield from get_db()


@pytest.fixture(scope="function")
def registry(db: RosterStore) -> Registry:
    """
    Registry facade bound to the test store.
    """
    return Registry(db)


@pytest.fixture
def team_data_factory():
    def _factory(**kwargs) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": 1,
            "name": "Internacional",
            "created_on": date(1909, 4, 4),
            "primary_color": "Red",
            "secondary_color": "White",
        }
        data.update(kwargs)
        return data
    return _factory


@pytest.fixture
def player_data_factory():
    def _factory(**kwargs) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": 10,
            "team_id": 1,
            "name": "Fernandão",
            "birth_date": date(1978, 3, 18),
            "skill_level": 5,
            "salary": Decimal("12000.00"),
        }
        data.update(kwargs)
        return data
    return _factory
