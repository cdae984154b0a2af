"""Shared pytest fixtures."""

import json
from collections.abc import AsyncGenerator, Iterator

import httpx
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from dispatcher.app import App
from dispatcher.config import Config
from dispatcher.core.core import Core
from dispatcher.web.server import create_fastapi_app

USER_HOST = "user-service"
GENERATOR_HOST = "generator-service"
CLICKER_HOST = "clicker-service"


class FakeDownstream:
    """In-memory stand-in for the user, generator and clicker services."""

    def __init__(self) -> None:
        self.tokens: dict[str, str] = {}  # access token -> username
        self.dangling_tokens: set[str] = set()  # valid tokens whose user is gone
        self.users: list[dict[str, str]] = []
        self.clicks: dict[str, list[dict[str, str]]] = {}
        self.down: set[str] = set()  # hosts refusing connections
        self.requests: list[httpx.Request] = []
        self.login_redirects = False  # answer /login with 302 instead of tokens

    def add_user(self, login: str, code: str, token: str | None = None) -> None:
        self.users.append({"login": login, "code": code})
        if token is not None:
            self.tokens[token] = login

    def calls(self, host: str, method: str, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.host == host and r.method == method and r.url.path == path]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        host = request.url.host
        if host in self.down:
            raise httpx.ConnectError("Connection refused", request=request)

        route = (host, request.method, request.url.path)
        body = json.loads(request.content) if request.content else {}

        if route == (USER_HOST, "POST", "/validate"):
            return httpx.Response(200, json=body["token"] in self.tokens or body["token"] in self.dangling_tokens)
        if route == (USER_HOST, "POST", "/username"):
            username = self.tokens.get(body["token"])
            if username is None:
                return httpx.Response(404, json={"message": "Unknown token"})
            return httpx.Response(200, text=username)
        if route == (USER_HOST, "POST", "/login"):
            if self.login_redirects:
                return httpx.Response(302, headers={"location": "/sso"})
            if {"login": body["login"], "code": body["code"]} not in self.users:
                return httpx.Response(401, json={"message": "Wrong login or code"})
            access_token = f"access-{body['login']}"
            self.tokens[access_token] = body["login"]
            return httpx.Response(200, json={"accessToken": access_token, "refreshToken": f"refresh-{body['login']}"})
        if route == (USER_HOST, "POST", "/users"):
            if any(user["login"] == body["login"] for user in self.users):
                return httpx.Response(409, json={"message": f"User {body['login']} already exists"})
            self.users.append({"login": body["login"], "code": body["code"]})
            return httpx.Response(201)
        if route == (USER_HOST, "GET", "/users"):
            return httpx.Response(200, json=self.users)
        if route == (GENERATOR_HOST, "POST", "/generate"):
            return httpx.Response(200, text=f"{body['login']}-1234")
        if route == (CLICKER_HOST, "POST", "/clicks"):
            self.clicks.setdefault(body["username"], []).append({"x": body["x"], "y": body["y"]})
            return httpx.Response(201)
        if route == (CLICKER_HOST, "GET", "/clicks"):
            return httpx.Response(200, json=self.clicks.get(request.url.params["username"], []))

        return httpx.Response(404, json={"message": "Not found"})


@pytest.fixture
def config() -> Config:
    return Config(
        user_service_url=f"http://{USER_HOST}",
        generator_service_url=f"http://{GENERATOR_HOST}",
        clicker_service_url=f"http://{CLICKER_HOST}",
        debug=True,
    )


@pytest.fixture
def downstream() -> FakeDownstream:
    """Downstream services with alice registered and logged in."""
    fake = FakeDownstream()
    fake.add_user("alice", "alice-code", token="token-alice")
    fake.add_user("carol", "carol-code")
    fake.clicks["alice"] = [{"x": "10", "y": "20"}, {"x": "30", "y": "40"}]
    return fake


@pytest_asyncio.fixture
async def core(config: Config, downstream: FakeDownstream) -> AsyncGenerator[Core]:
    core = Core(config, httpx.MockTransport(downstream.handler))
    async with core.lifespan():
        yield core


@pytest_asyncio.fixture
async def app(config: Config, downstream: FakeDownstream) -> AsyncGenerator[App]:
    app = App(config, httpx.MockTransport(downstream.handler))
    async with app.lifespan():
        yield app


@pytest.fixture
def client(config: Config, downstream: FakeDownstream) -> Iterator[TestClient]:
    app = App(config, httpx.MockTransport(downstream.handler))
    with TestClient(create_fastapi_app(app, config)) as client:
        yield client
