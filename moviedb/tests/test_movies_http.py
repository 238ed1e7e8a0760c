"""HTTP round trips through the real MovieService on an in-memory database."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from moviedb.database import Base, get_async_db
from moviedb.main import app

HUGE_ID = "99999999999999999999"


@pytest.fixture
def live_client(monkeypatch):
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    session_factory = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )

    async def create_tables():
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def override_get_async_db():
        async with session_factory() as session:
            yield session

    # Startup and shutdown run on the client's event loop, same as every request
    monkeypatch.setattr("moviedb.main.init_db", create_tables)
    monkeypatch.setattr("moviedb.main.close_db", engine.dispose)
    app.dependency_overrides[get_async_db] = override_get_async_db

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


def movie_payload(**overrides):
    payload = {
        "name": "Alien",
        "description": "In space no one can hear you scream",
        "genre": "Horror",
        "releaseDate": "1979-05-25T00:00:00",
    }
    payload.update(overrides)
    return payload


def test_create_then_get_round_trip(live_client):
    created = live_client.post("/movie", json=movie_payload(id=42))

    assert created.status_code == 201
    body = created.json()
    assert body["id"] == 1
    assert created.headers["location"] == f"/movie/{body['id']}"

    fetched = live_client.get(created.headers["location"].replace("/movie/", "/movies/"))

    assert fetched.status_code == 200
    assert fetched.json() == {
        "id": 1,
        "name": "Alien",
        "description": "In space no one can hear you scream",
        "genre": "Horror",
        "releaseDate": "1979-05-25T00:00:00",
    }


def test_create_without_description_stores_empty_string(live_client):
    payload = movie_payload()
    del payload["description"]

    movie_id = live_client.post("/movie", json=payload).json()["id"]

    assert live_client.get(f"/movies/{movie_id}").json()["description"] == ""


def test_list_returns_movies_in_creation_order(live_client):
    live_client.post("/movie", json=movie_payload(name="Zodiac", genre="Thriller"))
    live_client.post("/movie", json=movie_payload(name="Alien"))

    response = live_client.get("/movies")

    assert response.status_code == 200
    assert [(m["id"], m["name"]) for m in response.json()] == [(1, "Zodiac"), (2, "Alien")]


def test_rejected_create_persists_nothing(live_client):
    response = live_client.post("/movie", json=movie_payload(genre=""))

    assert response.status_code == 400
    assert response.json() == {"detail": "Genre is required"}
    assert live_client.get("/movies").json() == []


def test_update_then_get_reflects_new_fields(live_client):
    movie_id = live_client.post("/movie", json=movie_payload()).json()["id"]
    update = {
        "name": "Aliens",
        "description": "",
        "genre": "Action",
        "releaseDate": "1986-07-18T00:00:00",
    }

    response = live_client.put(f"/movie/{movie_id}", json=update)

    assert response.status_code == 204
    assert live_client.get(f"/movies/{movie_id}").json() == {"id": movie_id, **update}


def test_rejected_update_leaves_movie_unchanged(live_client):
    movie_id = live_client.post("/movie", json=movie_payload()).json()["id"]

    response = live_client.put(f"/movie/{movie_id}", json=movie_payload(releaseDate="1700-01-01T00:00:00"))

    assert response.status_code == 400
    assert response.json() == {"detail": "Release date cannot be earlier than the year 1888."}
    assert live_client.get(f"/movies/{movie_id}").json()["releaseDate"] == "1979-05-25T00:00:00"


def test_delete_twice_returns_ok_then_not_found(live_client):
    movie_id = live_client.post("/movie", json=movie_payload()).json()["id"]

    first = live_client.delete(f"/movie/{movie_id}")
    second = live_client.delete(f"/movie/{movie_id}")

    assert first.status_code == 200
    assert second.status_code == 404
    assert second.content == b""
    assert live_client.get(f"/movies/{movie_id}").status_code == 404


def test_deleted_id_is_not_reused(live_client):
    first_id = live_client.post("/movie", json=movie_payload()).json()["id"]
    live_client.delete(f"/movie/{first_id}")

    second = live_client.post("/movie", json=movie_payload())

    assert second.json()["id"] > first_id
    assert second.headers["location"] == f"/movie/{second.json()['id']}"


@pytest.mark.parametrize("method, path", [
    ("GET", f"/movies/{HUGE_ID}"),
    ("PUT", f"/movie/{HUGE_ID}"),
    ("DELETE", f"/movie/{HUGE_ID}"),
])
def test_ids_beyond_64_bits_are_not_found(live_client, method, path):
    live_client.post("/movie", json=movie_payload())
    kwargs = {"json": movie_payload()} if method == "PUT" else {}

    response = live_client.request(method, path, **kwargs)

    assert response.status_code == 404
    assert response.content == b""
    assert len(live_client.get("/movies").json()) == 1
