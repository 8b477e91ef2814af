from __future__ import annotations

import pytest
from httpx import AsyncClient
from sqlalchemy import func, select

from filmoteka.core.config import settings
from filmoteka.db.models.film import Film
from filmoteka.db.models.film_actor import FilmActor
from tests.utils.factory import create_actor, create_film

API = settings.API_V1_STR


def _film_body(**overrides):
    body = {
        "name": "No Country for Old Men",
        "description": "A hunter stumbles on drug money.",
        "date_of_release": "2007-11-09",
        "rating": 8.2,
        "actor_ids": [],
    }
    body.update(overrides)
    return body


async def _count(db_session, model) -> int:
    return (await db_session.execute(select(func.count()).select_from(model))).scalar_one()


# ─────────────────────────────────────────────────────────────
# Films
# ─────────────────────────────────────────────────────────────
@pytest.mark.anyio
async def test_create_film_with_cast(admin_client: AsyncClient, db_session):
    a1 = await create_actor(db_session, name="Javier", surname="Bardem")
    a2 = await create_actor(db_session, name="Josh", surname="Brolin")

    resp = await admin_client.post(f"{API}/admin/film", json=_film_body(actor_ids=[a1.id, a2.id]))

    assert resp.status_code == 200, resp.text
    created = resp.json()
    assert created["id"] > 0 and "actor_ids" not in created
    assert "no-store" in resp.headers["Cache-Control"]
    assert await _count(db_session, FilmActor) == 2


@pytest.mark.anyio
async def test_create_film_with_missing_actor_is_400_and_atomic(admin_client: AsyncClient, db_session):
    a1 = await create_actor(db_session)

    resp = await admin_client.post(f"{API}/admin/film", json=_film_body(actor_ids=[a1.id, 9999]))

    assert resp.status_code == 400
    assert resp.json()["error"] == "bad add data"
    assert await _count(db_session, Film) == 0
    assert await _count(db_session, FilmActor) == 0


@pytest.mark.anyio
@pytest.mark.parametrize(
    "overrides",
    [{"rating": 11}, {"name": ""}, {"description": "x" * 1001}, {"actor_ids": [0]}, {"date_of_release": "soon"}],
)
async def test_create_film_invalid_body_is_422(admin_client: AsyncClient, overrides):
    resp = await admin_client.post(f"{API}/admin/film", json=_film_body(**overrides))

    assert resp.status_code == 422
    assert resp.json()["error"] == "validation error"


@pytest.mark.anyio
async def test_update_film(admin_client: AsyncClient, db_session):
    a1 = await create_actor(db_session)
    a2 = await create_actor(db_session, name="Carrie-Anne", surname="Moss")
    film_id = (await create_film(db_session, actor_ids=[a1.id])).id

    resp = await admin_client.put(
        f"{API}/admin/film", json=_film_body(id=film_id, name="Renamed", actor_ids=[a2.id])
    )

    assert resp.status_code == 200, resp.text
    assert resp.json()["name"] == "Renamed"
    cast = (await db_session.execute(select(FilmActor.actor_id))).scalars().all()
    assert cast == [a2.id]


@pytest.mark.anyio
async def test_update_film_bad_data_is_400(admin_client: AsyncClient, db_session):
    film_id = (await create_film(db_session)).id

    unknown_film = await admin_client.put(f"{API}/admin/film", json=_film_body(id=film_id + 50))
    unknown_actor = await admin_client.put(f"{API}/admin/film", json=_film_body(id=film_id, actor_ids=[777]))

    assert unknown_film.status_code == 400
    assert unknown_actor.status_code == 400
    assert unknown_actor.json()["error"] == "bad update data"


@pytest.mark.anyio
async def test_delete_film(admin_client: AsyncClient, db_session):
    actor = await create_actor(db_session)
    film_id = (await create_film(db_session, actor_ids=[actor.id])).id

    first = await admin_client.delete(f"{API}/admin/film/{film_id}")
    second = await admin_client.delete(f"{API}/admin/film/{film_id}")

    assert first.status_code == 200
    assert first.json() == {"result": "success"}
    assert await _count(db_session, FilmActor) == 0
    assert second.status_code == 404


# ─────────────────────────────────────────────────────────────
# Actors
# ─────────────────────────────────────────────────────────────
@pytest.mark.anyio
async def test_actor_lifecycle(admin_client: AsyncClient):
    created = await admin_client.post(
        f"{API}/admin/actor",
        json={"name": "Tilda", "surname": "Swinton", "gender": "female", "birthday": "1960-11-05"},
    )
    assert created.status_code == 200, created.text
    actor_id = created.json()["id"]

    updated = await admin_client.put(
        f"{API}/admin/actor",
        json={"id": actor_id, "name": "Tilda", "surname": "Swinton", "gender": "female", "birthday": "1960-11-06"},
    )
    assert updated.status_code == 200
    assert updated.json()["birthday"] == "1960-11-06"

    deleted = await admin_client.delete(f"{API}/admin/actor/{actor_id}")
    assert deleted.json() == {"result": "success"}
    assert (await admin_client.get(f"{API}/actor/{actor_id}")).status_code == 404


@pytest.mark.anyio
async def test_actor_unknown_id_is_404(admin_client: AsyncClient):
    body = {"id": 4040, "name": "A", "surname": "B", "gender": "male", "birthday": "1970-01-01"}

    assert (await admin_client.put(f"{API}/admin/actor", json=body)).status_code == 404
    assert (await admin_client.delete(f"{API}/admin/actor/4040")).status_code == 404


@pytest.mark.anyio
async def test_actor_bad_gender_is_422(admin_client: AsyncClient):
    resp = await admin_client.post(
        f"{API}/admin/actor",
        json={"name": "A", "surname": "B", "gender": "unknown", "birthday": "1970-01-01"},
    )
    assert resp.status_code == 422
