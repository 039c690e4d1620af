"""Tests for the SQLAlchemy repositories against a real async session."""

from datetime import date

import pytest

from tests.fakes import make_team, make_user, make_vacation
from vacation_manager.models.vacation import VacationStatus
from vacation_manager.repositories import TeamRepository, UserRepository, VacationRepository


@pytest.fixture
def vacations(db_session):
    return VacationRepository(db_session)


@pytest.fixture
def users(db_session):
    return UserRepository(db_session)


@pytest.fixture
def teams(db_session):
    return TeamRepository(db_session)


async def persist(session, *objects):
    session.add_all(objects)
    await session.flush()
    return objects[0] if len(objects) == 1 else objects


# ---------------------------------------------------------------------------
# VacationRepository
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_get_by_user_id_newest_first(db_session, vacations):
    team = make_team()
    alice = make_user(team_id=team.id)
    bob = make_user(team_id=team.id)
    march = make_vacation(alice, date(2025, 3, 1), date(2025, 3, 2))
    january = make_vacation(alice, date(2025, 1, 1), date(2025, 1, 2))
    june = make_vacation(alice, date(2025, 6, 1), date(2025, 6, 2))
    bobs = make_vacation(bob, date(2025, 4, 1), date(2025, 4, 2))
    await persist(db_session, team, alice, bob, march, january, june, bobs)

    result = await vacations.get_by_user_id(alice.id)

    assert [v.id for v in result] == [june.id, march.id, january.id]


@pytest.mark.asyncio
async def test_get_by_team_joins_through_owner(db_session, vacations):
    platform, data = make_team("Platform"), make_team("Data")
    alice = make_user(team_id=platform.id, name="Alice Member")
    carol = make_user(team_id=platform.id, name="Carol Member")
    dave = make_user(team_id=data.id)
    loner = make_user()
    later = make_vacation(alice, date(2025, 5, 1), date(2025, 5, 3))
    earlier = make_vacation(carol, date(2025, 2, 1), date(2025, 2, 3))
    elsewhere = make_vacation(dave, date(2025, 3, 1), date(2025, 3, 3))
    teamless = make_vacation(loner, date(2025, 3, 1), date(2025, 3, 3))
    await persist(db_session, platform, data, alice, carol, dave, loner, later, earlier, elsewhere, teamless)

    result = await vacations.get_by_team(platform.id)

    assert [v.id for v in result] == [earlier.id, later.id]
    assert {v.user.display_name for v in result} == {alice.display_name, carol.display_name}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "start, end, expected",
    [
        (date(2025, 1, 12), date(2025, 1, 20), True),
        (date(2025, 1, 5), date(2025, 1, 10), True),
        (date(2025, 1, 11), date(2025, 1, 11), True),
        (date(2025, 1, 1), date(2025, 1, 31), True),
        (date(2025, 1, 13), date(2025, 1, 20), False),
        (date(2025, 1, 1), date(2025, 1, 9), False),
    ],
)
async def test_get_by_date_range_is_inclusive(db_session, vacations, start, end, expected):
    user = make_user()
    vacation = make_vacation(user, date(2025, 1, 10), date(2025, 1, 12))
    await persist(db_session, user, vacation)

    result = await vacations.get_by_date_range(start, end)

    assert ([v.id for v in result] == [vacation.id]) is expected


@pytest.mark.asyncio
async def test_create_and_get_by_id(db_session, vacations):
    user = await persist(db_session, make_user(name="Alice Example"))
    vacation = make_vacation(user, date(2025, 1, 10), date(2025, 1, 12))

    await vacations.create(vacation)
    db_session.expire_all()
    loaded = await vacations.get_by_id(vacation.id)

    assert loaded.status == VacationStatus.PENDING
    assert loaded.user_name == "Alice Example"
    assert loaded.created_at is not None


@pytest.mark.asyncio
async def test_delete_vacation(db_session, vacations):
    user = make_user()
    vacation = make_vacation(user, date(2025, 1, 10), date(2025, 1, 12))
    await persist(db_session, user, vacation)

    await vacations.delete(vacation)

    assert await vacations.get_by_id(vacation.id) is None
    assert await vacations.get_by_user_id(user.id) == []


# ---------------------------------------------------------------------------
# UserRepository
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_user_lookups(db_session, users):
    team = make_team()
    zoe = make_user(team_id=team.id, name="Zoe Zed", email="zoe@example.com")
    adam = make_user(team_id=team.id, name="Adam Ant")
    outsider = make_user(name="Olga Out")
    await persist(db_session, team, zoe, adam, outsider)

    assert await users.count() == 3
    assert (await users.get_by_entra_id(zoe.entra_id)).id == zoe.id
    assert (await users.get_by_email("zoe@example.com")).id == zoe.id
    assert await users.get_by_email("nobody@example.com") is None
    assert [u.display_name for u in await users.get_by_team(team.id)] == ["Adam Ant", "Zoe Zed"]
    assert [u.display_name for u in await users.get_all()] == ["Adam Ant", "Olga Out", "Zoe Zed"]


# ---------------------------------------------------------------------------
# TeamRepository
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_get_by_user(db_session, teams):
    team = make_team()
    member = make_user(team_id=team.id)
    loner = make_user()
    await persist(db_session, team, member, loner)

    assert [t.id for t in await teams.get_by_user(member.id)] == [team.id]
    assert await teams.get_by_user(loner.id) == []


@pytest.mark.asyncio
async def test_delete_team_keeps_members_without_team(db_session, teams, users):
    team, other = make_team("Platform"), make_team("Data")
    alice = make_user(team_id=team.id)
    bob = make_user(team_id=team.id)
    carol = make_user(team_id=other.id)
    await persist(db_session, team, other, alice, bob, carol)

    await teams.delete(team)
    db_session.expire_all()

    assert await teams.get_by_id(team.id) is None
    assert (await users.get_by_id(alice.id)).team_id is None
    assert (await users.get_by_id(bob.id)).team_id is None
    assert (await users.get_by_id(carol.id)).team_id == other.id
    assert await users.count() == 3
