"""
Latvian Phone Index — Lookup API
================================
Answers "which pages mention this phone number?" from the index the
crawler writes.

Start:
    uvicorn main_api:app --reload --port 4567

Endpoints:
    GET /                       health check, plain "OK"
    GET /search?number=22811907
"""

import logging
from contextlib import asynccontextmanager
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()

from fastapi import Depends, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel

from phonecrawler.domain.entities.phone_number import InvalidPhoneNumberError
from phonecrawler.use_cases.lookup_phone import LookupPhoneRequest

logging.basicConfig(level=logging.INFO, format="%(levelname)s  %(name)s: %(message)s")
logger = logging.getLogger(__name__)


# ── Response models ───────────────────────────────────────────────────────────


class SearchResponse(BaseModel):
    results: List[str]
    found: bool
    normalized_number: str


class ErrorResponse(BaseModel):
    error: str


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def create_app(container=None) -> FastAPI:
    """
    Build the API. Pass a ready Container in tests; otherwise one is built
    from the environment at startup and closed on shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.container = container
        app.state.startup_error = None
        owns_container = container is None

        if owns_container:
            try:
                from phonecrawler.infrastructure.config import Config
                from phonecrawler.infrastructure.container import Container

                app.state.container = Container(Config.from_env())
                logger.info("Container initialised successfully.")
            except Exception as e:
                app.state.startup_error = str(e)
                logger.error(f"Container startup failed: {e}")

        try:
            yield
        finally:
            if owns_container and app.state.container is not None:
                await app.state.container.close()

    app = FastAPI(title="Latvian Phone Index API", version="1.0.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    def get_container(request: Request):
        return getattr(request.app.state, "container", None)

    # ── Health ────────────────────────────────────────────────────────────────

    @app.get("/", response_class=PlainTextResponse, tags=["meta"])
    async def health():
        return "OK"

    # ── Search ────────────────────────────────────────────────────────────────

    @app.get(
        "/search",
        response_model=SearchResponse,
        responses={400: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
        tags=["search"],
    )
    async def search(
        request: Request,
        number: Optional[str] = None,
        c=Depends(get_container),
    ):
        if number is None:
            return _error(status.HTTP_400_BAD_REQUEST, "Missing number parameter")

        if c is None:
            reason = getattr(request.app.state, "startup_error", None) or "Service not ready."
            return _error(status.HTTP_503_SERVICE_UNAVAILABLE, f"Service misconfigured: {reason}")

        try:
            response = await c.lookup_use_case.execute(LookupPhoneRequest(number=number))
        except InvalidPhoneNumberError as e:
            return _error(status.HTTP_400_BAD_REQUEST, str(e))
        except Exception as e:
            logger.error(f"[Lookup] Store unavailable: {e!r}", exc_info=True)
            return _error(status.HTTP_503_SERVICE_UNAVAILABLE, "Phone index is unavailable")

        return SearchResponse(**response.to_dict())

    return app


app = create_app()
