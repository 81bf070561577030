import argparse
import sys

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse, Response
from fastapi.staticfiles import StaticFiles
from loguru import logger

from newsroom.config import Settings, get_settings
from newsroom.exceptions import IntegrationError, InvalidPageNumberError, RenderError
from newsroom.logger import setup_logger
from newsroom.routers.search import router as search_router


# --- Exception handlers ---

async def invalid_page_handler(request: Request, exc: InvalidPageNumberError):
    logger.warning(str(exc))
    return PlainTextResponse("Unexpected server error", status_code=500)


async def integration_error_handler(request: Request, exc: IntegrationError):
    return Response(status_code=500)


async def render_error_handler(request: Request, exc: RenderError):
    logger.error(str(exc))
    return Response(status_code=500)


# --- FastAPI app ---

def create_app(settings: Settings) -> FastAPI:
    """Build the app with settings injected into every handler."""
    app = FastAPI(title="Newsroom", version="0.1.0")
    app.dependency_overrides[get_settings] = lambda: settings
    app.include_router(search_router)
    app.mount(
        "/assets",
        StaticFiles(directory=settings.assets_dir, check_dir=False),
        name="assets",
    )
    app.add_exception_handler(InvalidPageNumberError, invalid_page_handler)
    app.add_exception_handler(IntegrationError, integration_error_handler)
    app.add_exception_handler(RenderError, render_error_handler)
    return app


# --- Entry point ---

def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="newsroom", description="Search news articles from newsapi.org")
    parser.add_argument("--apikey", default=None, help="Newsapi.org access key (defaults to NEWS_API_KEY)")
    parser.add_argument("--port", type=int, default=None, help="Port to listen on (defaults to PORT or 3000)")
    return parser.parse_args(argv)


def load_settings(args: argparse.Namespace, base: Settings | None = None) -> Settings:
    overrides = {}
    if args.apikey:
        overrides["news_api_key"] = args.apikey
    if args.port is not None:
        overrides["port"] = args.port
    return (base or get_settings()).model_copy(update=overrides)


def run(argv: list[str] | None = None):
    settings = load_settings(parse_args(argv))
    setup_logger(settings.log_level)
    if not settings.news_api_key:
        logger.critical("apiKey must be set")
        sys.exit(1)

    logger.info(f"Listening on {settings.host}:{settings.port}")
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
