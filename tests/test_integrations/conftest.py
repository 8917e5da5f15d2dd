"""In-process API servers for integration tests.

Both apps accept ``Authorization: Bearer abc123`` on ``/posts`` and answer
401 otherwise. ``/echo`` is public and returns the request headers it saw.
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from flask import Flask, jsonify
from flask import request as flask_request

VALID_AUTHORIZATION = "Bearer abc123"

POSTS = [{"id": 1, "title": "Public Post"}, {"id": 3, "title": "Bob's Post"}]


def _create_flask_app() -> Flask:
    app = Flask(__name__)

    @app.get("/posts")
    def list_posts():  # pyright: ignore[reportUnusedFunction]
        if flask_request.headers.get("Authorization") != VALID_AUTHORIZATION:
            return jsonify({"errors": [{"status": "401", "title": "Unauthorized"}]}), 401
        return jsonify({"data": POSTS})

    @app.get("/echo")
    def echo():  # pyright: ignore[reportUnusedFunction]
        return jsonify({"headers": dict(flask_request.headers.items())})

    return app


def _create_fastapi_app() -> FastAPI:
    app = FastAPI()

    @app.get("/posts")
    async def list_posts(request: Request) -> JSONResponse:  # pyright: ignore[reportUnusedFunction]
        if request.headers.get("authorization") != VALID_AUTHORIZATION:
            return JSONResponse(
                status_code=401,
                content={"errors": [{"status": "401", "title": "Unauthorized"}]},
            )
        return JSONResponse(content={"data": POSTS})

    @app.get("/echo")
    async def echo(request: Request) -> JSONResponse:  # pyright: ignore[reportUnusedFunction]
        return JSONResponse(content={"headers": dict(request.headers.items())})

    return app


@pytest.fixture()
def flask_app() -> Flask:
    return _create_flask_app()


@pytest.fixture()
def fastapi_app() -> FastAPI:
    return _create_fastapi_app()
