"""Tests for data model imports and basic structure."""

import uuid
from datetime import date

from tests.fakes import make_user, make_vacation


def test_models_import():
    """Verify models can be imported and map to the expected tables."""
    from vacation_manager.models import Team, User, Vacation

    assert Team.__tablename__ == "teams"
    assert User.__tablename__ == "users"
    assert Vacation.__tablename__ == "vacations"


def test_models_share_declarative_base():
    from vacation_manager.database import Base
    from vacation_manager.models import Team, User, Vacation

    assert {"teams", "users", "vacations"} <= set(Base.metadata.tables)
    assert issubclass(Vacation, Base) and issubclass(User, Base) and issubclass(Team, Base)


def test_enum_columns_store_values():
    from vacation_manager.models import Vacation, VacationStatus

    column = Vacation.__table__.c.status
    assert column.type.enums == [s.value for s in VacationStatus]


def test_vacation_duration_is_inclusive():
    vacation = make_vacation(make_user(), date(2025, 1, 10), date(2025, 1, 15))
    assert vacation.duration_days == 6


def test_vacation_user_name():
    user = make_user(name="Bob Builder")
    assert make_vacation(user, date(2025, 1, 1), date(2025, 1, 1)).user_name == "Bob Builder"


def test_user_has_team():
    assert make_user().has_team is False
    assert make_user(team_id=uuid.uuid4()).has_team is True
