"""Tests for the teams endpoints."""

import uuid
from datetime import date

import pytest

from tests.fakes import identity_headers, make_team, make_user, make_vacation
from vacation_manager.models.vacation import VacationStatus

API = "/api/v1"


@pytest.fixture
def team(store):
    return store.add(make_team("Platform", description="Core services"))


@pytest.fixture
def other_team(store):
    return store.add(make_team("Data"))


@pytest.fixture
def member(store, team):
    return store.add(make_user(team_id=team.id))


@pytest.fixture
def manager(store):
    return store.add(make_user(is_manager=True))


@pytest.mark.asyncio
async def test_manager_sees_all_teams(app_client, team, other_team, manager):
    response = await app_client.get(f"{API}/teams", headers=identity_headers(manager))
    assert response.status_code == 200
    assert [t["name"] for t in response.json()] == ["Data", "Platform"]


@pytest.mark.asyncio
async def test_member_sees_own_team(app_client, team, other_team, member):
    response = await app_client.get(f"{API}/teams", headers=identity_headers(member))
    assert response.status_code == 200
    assert [t["id"] for t in response.json()] == [str(team.id)]


@pytest.mark.asyncio
async def test_user_without_team_sees_none(app_client, store, team):
    loner = store.add(make_user())
    response = await app_client.get(f"{API}/teams", headers=identity_headers(loner))
    assert response.json() == []


@pytest.mark.asyncio
async def test_get_team(app_client, team, member):
    response = await app_client.get(f"{API}/teams/{team.id}", headers=identity_headers(member))
    assert response.status_code == 200
    assert response.json()["description"] == "Core services"


@pytest.mark.asyncio
async def test_get_missing_team(app_client, member):
    response = await app_client.get(f"{API}/teams/{uuid.uuid4()}", headers=identity_headers(member))
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_create_team_requires_manager(app_client, member):
    response = await app_client.post(f"{API}/teams", json={"name": "Ops"}, headers=identity_headers(member))
    assert response.status_code == 403
    assert response.json()["code"] == "MANAGER_ROLE_REQUIRED"


@pytest.mark.asyncio
async def test_manager_creates_team(app_client, store, manager):
    response = await app_client.post(
        f"{API}/teams",
        json={"name": "Ops", "description": "On call"},
        headers=identity_headers(manager),
    )
    assert response.status_code == 201
    assert response.json()["name"] == "Ops"
    assert [t.name for t in store.teams.values()] == ["Ops"]


@pytest.mark.asyncio
async def test_create_team_validates_name(app_client, manager):
    response = await app_client.post(f"{API}/teams", json={"name": "O"}, headers=identity_headers(manager))
    assert response.status_code == 422
    assert response.json()["code"] == "INVALID_REQUEST"
    assert response.json()["error"].startswith("name: ")


@pytest.mark.asyncio
async def test_update_team_keeps_name_when_empty(app_client, team, manager):
    response = await app_client.put(
        f"{API}/teams/{team.id}",
        json={"name": "", "description": "Platform and tooling"},
        headers=identity_headers(manager),
    )
    assert response.status_code == 200
    assert response.json()["name"] == "Platform"
    assert team.description == "Platform and tooling"


@pytest.mark.asyncio
async def test_delete_team_detaches_members(app_client, store, team, member, manager):
    response = await app_client.delete(f"{API}/teams/{team.id}", headers=identity_headers(manager))
    assert response.status_code == 204
    assert team.id not in store.teams
    assert member.team_id is None


@pytest.mark.asyncio
async def test_team_vacations_for_member(app_client, store, team, member):
    store.add(
        make_vacation(member, date(2025, 1, 1), date(2025, 1, 2)),
        make_vacation(member, date(2025, 3, 1), date(2025, 3, 2), VacationStatus.APPROVED),
    )

    response = await app_client.get(f"{API}/teams/{team.id}/vacations", headers=identity_headers(member))
    assert response.status_code == 200
    assert len(response.json()) == 2


@pytest.mark.asyncio
async def test_team_vacations_date_range_filters_by_team(app_client, store, team, other_team, member, manager):
    outsider = store.add(make_user(team_id=other_team.id))
    store.add(
        make_vacation(member, date(2025, 1, 1), date(2025, 1, 2)),
        make_vacation(member, date(2025, 3, 1), date(2025, 3, 2)),
        make_vacation(outsider, date(2025, 1, 1), date(2025, 1, 2)),
    )

    response = await app_client.get(
        f"{API}/teams/{team.id}/vacations",
        params={"startDate": "2025-01-01", "endDate": "2025-01-31"},
        headers=identity_headers(manager),
    )
    assert response.status_code == 200
    assert [v["user_id"] for v in response.json()] == [str(member.id)]


@pytest.mark.asyncio
async def test_team_vacations_denied_for_outsider(app_client, store, team, other_team):
    outsider = store.add(make_user(team_id=other_team.id))
    response = await app_client.get(f"{API}/teams/{team.id}/vacations", headers=identity_headers(outsider))
    assert response.status_code == 403
    assert response.json()["code"] == "SAME_TEAM_REQUIRED"
