"""Identity token verification and error rendering."""

import uuid
from datetime import datetime, timedelta, timezone

import pytest
from fastapi import FastAPI, HTTPException
from httpx import ASGITransport, AsyncClient
from jose import jwt

from plates.core.config import get_settings
from plates.core.security import CurrentUser, decode_identity_token, get_current_user
from plates.main import app, register_error_handlers

from conftest import USER_ID

SECRET = "test-secret"


def make_token(sub=str(USER_ID), audience="authenticated", expires_in=timedelta(hours=1), **claims):
    payload = {
        "sub": sub,
        "aud": audience,
        "exp": datetime.now(timezone.utc) + expires_in,
        **claims,
    }
    return jwt.encode(payload, SECRET, algorithm="HS256")


class TestDecodeIdentityToken:
    def test_valid_token(self):
        token = make_token(user_metadata={"initial_weight": 180})

        user = decode_identity_token(token, get_settings())

        assert user == CurrentUser(id=USER_ID, user_metadata={"initial_weight": 180})

    @pytest.mark.parametrize(
        "token",
        [
            make_token(expires_in=timedelta(seconds=-30)),
            make_token(audience="someone-else"),
            make_token(sub="not-a-uuid"),
            jwt.encode({"sub": str(USER_ID), "aud": "authenticated"}, "wrong-secret", algorithm="HS256"),
            "garbage",
        ],
    )
    def test_rejected_tokens(self, token):
        with pytest.raises(HTTPException) as info:
            decode_identity_token(token, get_settings())
        assert info.value.status_code == 401

    def test_missing_secret_rejects_everything(self):
        settings = get_settings().model_copy(update={"auth_jwt_secret": ""})
        with pytest.raises(HTTPException) as info:
            decode_identity_token(make_token(), settings)
        assert info.value.status_code == 401


@pytest.mark.anyio
async def test_requests_need_bearer_token(client, base_exercises):
    app.dependency_overrides.pop(get_current_user)

    missing = await client.get("/exercises")
    wrong_scheme = await client.get("/exercises", headers={"Authorization": f"Basic {make_token()}"})
    valid = await client.get("/exercises", headers={"Authorization": f"Bearer {make_token()}"})

    assert missing.status_code == 401
    assert missing.json() == {"error": "Unauthorized"}
    assert missing.headers["www-authenticate"] == "Bearer"
    assert wrong_scheme.status_code == 401
    assert valid.status_code == 200


@pytest.mark.anyio
async def test_token_identifies_caller(client):
    app.dependency_overrides.pop(get_current_user)
    other = uuid.uuid4()

    await client.post(
        "/workouts",
        json={"name": "Push"},
        headers={"Authorization": f"Bearer {make_token(sub=str(other))}"},
    )
    response = await client.get(
        "/workouts", headers={"Authorization": f"Bearer {make_token(sub=str(other))}"}
    )

    assert [w["user_id"] for w in response.json()] == [str(other)]


@pytest.mark.anyio
async def test_health_needs_no_token(client, base_exercises):
    app.dependency_overrides.pop(get_current_user)

    live = await client.get("/health")
    ready = await client.get("/health/ready")

    assert live.status_code == 200
    assert live.json()["service"] == "Plates API"
    assert ready.json() == {"status": "ok", "database": "connected", "base_exercises": 5}


@pytest.mark.anyio
async def test_tools(client):
    parsed = await client.get("/tools/parse-time", params={"value": "1:05:30"})
    invalid = await client.get("/tools/parse-time", params={"value": "abc"})
    score = await client.get("/tools/strength-score", params={"weight": 100, "reps": 5})
    zero = await client.get("/tools/strength-score", params={"weight": 0, "reps": 5})

    assert parsed.json() == {"minutes": 65.5, "formatted": "1:05:30"}
    assert invalid.status_code == 400
    assert invalid.json() == {"error": "Invalid time format. Use MM:SS or HH:MM:SS"}
    assert score.json() == {"weight": 100.0, "reps": 5, "score": 112.5}
    assert zero.json()["score"] is None


@pytest.mark.anyio
async def test_bad_path_parameter_is_400(client):
    response = await client.get("/exercises/not-a-uuid")

    assert response.status_code == 400
    assert response.json()["error"].startswith("exercise_id:")


@pytest.mark.anyio
async def test_unhandled_errors_are_500(anyio_backend):
    broken = FastAPI()
    register_error_handlers(broken)

    @broken.get("/boom")
    async def boom():
        raise RuntimeError("database exploded")

    transport = ASGITransport(app=broken, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        response = await c.get("/boom")

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
