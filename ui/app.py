"""FastAPI application factory."""

import asyncio
from contextlib import asynccontextmanager

from fastapi import FastAPI

from config import load_config
from core.health import HealthChecker, check_codec, check_event_loop, create_generator_check
from internal.logging import get_logger, LogLevel, StructuredLogger
from timeid.prng import Sfc32
from utils.crash import create_async_handler
from ui.routes import api, health

VERSION = "1.0.0"


def create_app(config=None):
    """Create and configure the FastAPI application."""
    config = config or load_config()

    # Configure structured logging
    StructuredLogger.configure(min_level=LogLevel.parse(config.logging.level))
    logger_instance = get_logger()

    # One generator per app; endpoints are async so draws stay on the loop thread
    prng = Sfc32(seed=config.generator.seed)
    health_checker = HealthChecker()
    health_checker.register("event_loop", check_event_loop, critical=True)
    health_checker.register("codec", check_codec, critical=True)
    health_checker.register("generator",
                            create_generator_check(prng, config.generator.suffix_length, config.generator.delimiter),
                            critical=False)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger_instance.info("Application starting", version=VERSION, seeded=config.generator.seed is not None)
        loop = asyncio.get_running_loop()
        loop.set_exception_handler(create_async_handler(logger_instance))

        yield

        logger_instance.info("Application shutdown complete", draws=prng.draws)

    app = FastAPI(
        title="TimeID",
        version=VERSION,
        description="lexicographically sortable unique identifiers",
        lifespan=lifespan,
    )

    # Initialize route modules with dependencies
    api.init(prng, config.generator)
    health.init(prng, health_checker)

    app.include_router(api.router)
    app.include_router(health.router)

    @app.get("/")
    async def index():
        """Service summary."""
        return {"service": "timeid", "version": VERSION, "docs": "/docs"}

    return app
