"""
Account auth service — application entry point.
"""

from __future__ import annotations

import logging
import sys

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.middleware import register_exception_handlers, register_middleware
from auth.routes import router as auth_router
from config.settings import config
from database.session import create_tables

logging.basicConfig(
    level=logging.DEBUG if config.debug else logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
    stream=sys.stdout,
)
for _noisy in ("sqlalchemy.engine", "asyncio"):
    logging.getLogger(_noisy).setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Account Auth Service",
        version="1.0.0",
        description="User registration, login and access-token validation.",
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_middleware(app)
    register_exception_handlers(app)

    # Routes
    app.include_router(auth_router, prefix="/api/v1/auth")

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "ok"}

    @app.on_event("startup")
    async def on_startup():
        if not config.jwt_secret:
            raise RuntimeError("Startup validation failed — JWT_SECRET is not set")

        if config.create_tables_on_startup:
            logger.info("Ensuring account tables exist…")
            await create_tables()

        logger.info("Application ready to accept requests.")

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level="debug" if config.debug else "info",
    )
