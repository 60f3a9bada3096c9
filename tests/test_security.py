import pytest
from fastapi import Depends, FastAPI, HTTPException
from fastapi.security import HTTPAuthorizationCredentials
from fastapi.testclient import TestClient

from app.dependencies import get_settings
from app.security import get_backend_token
from app.settings import Settings


def bearer(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


def test_get_backend_token_accepts_matching_secret():
    settings = Settings(_env_file=None, BACKEND_SECRET_KEY="secret")

    result = get_backend_token(credentials=bearer("secret"), current_settings=settings)
    assert result == "secret"


def test_get_backend_token_rejects_wrong_secret():
    settings = Settings(_env_file=None, BACKEND_SECRET_KEY="secret")

    with pytest.raises(HTTPException) as exc:
        get_backend_token(credentials=bearer("wrong"), current_settings=settings)
    assert exc.value.status_code == 401


def test_get_backend_token_rejects_missing_header():
    settings = Settings(_env_file=None, BACKEND_SECRET_KEY="secret")

    with pytest.raises(HTTPException) as exc:
        get_backend_token(credentials=None, current_settings=settings)
    assert exc.value.status_code == 401


def test_get_backend_token_rejects_everything_without_configured_secret():
    settings = Settings(_env_file=None, BACKEND_SECRET_KEY=None)

    with pytest.raises(HTTPException):
        get_backend_token(credentials=bearer(""), current_settings=settings)
    with pytest.raises(HTTPException):
        get_backend_token(credentials=bearer("None"), current_settings=settings)


def make_secure_app(secret: str) -> FastAPI:
    app = FastAPI()
    app.dependency_overrides[get_settings] = lambda: Settings(
        _env_file=None, BACKEND_SECRET_KEY=secret
    )

    @app.get("/secure")
    async def secure(token=Depends(get_backend_token)):
        return {"ok": True}

    return app


def test_dependency_in_route_accepts_valid_token():
    client = TestClient(make_secure_app("secret"))
    res = client.get("/secure", headers={"Authorization": "Bearer secret"})
    assert res.status_code == 200
    assert res.json() == {"ok": True}


def test_dependency_in_route_rejects_invalid_token():
    client = TestClient(make_secure_app("secret"))
    res = client.get("/secure", headers={"Authorization": "Bearer wrong"})
    assert res.status_code == 401
    assert res.headers["WWW-Authenticate"] == "Bearer"


def test_dependency_in_route_rejects_non_bearer_scheme():
    client = TestClient(make_secure_app("secret"))
    res = client.get("/secure", headers={"Authorization": "Basic secret"})
    assert res.status_code == 401
