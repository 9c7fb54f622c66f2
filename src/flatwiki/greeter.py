"""Tiny greeting server: answers every path with a declaration of love."""

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse


def create_greeter_app() -> FastAPI:
    app = FastAPI(title="Greeter")

    @app.get("/{rest:path}", response_class=PlainTextResponse)
    async def greet(rest: str):
        return f"I love {rest}!"

    return app
