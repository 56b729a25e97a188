"""
Production FastAPI Application

`uvicorn src.main:app` or `python -m src.main`.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
import uvicorn

from src.platform.app_factory import SERVICE_NAME, create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import TracingConfig


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [BookMyEvent] Starting up...')

    # Setup OpenTelemetry tracing (no-op unless an exporter is configured)
    tracing = TracingConfig(service_name=SERVICE_NAME)
    tracing.setup()
    Logger.base.info('📊 [BookMyEvent] OpenTelemetry tracing configured')

    # Wire dependency injection for all modules
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [BookMyEvent] Dependency injection wired')

    # Connect MongoDB (fail-fast: ping + indexes)
    database = container.database()
    await database.connect()

    Logger.base.info('✅ [BookMyEvent] Ready to serve requests')

    yield

    Logger.base.info('🛑 [BookMyEvent] Shutting down...')

    await database.close()

    # Shutdown tracing (flush remaining spans)
    tracing.shutdown()
    Logger.base.info('📊 [BookMyEvent] Tracing shutdown complete')

    # Unwire DI
    container.unwire()

    Logger.base.info('👋 [BookMyEvent] Shutdown complete')


# Create FastAPI app using shared factory
app = create_app(lifespan=lifespan)


if __name__ == '__main__':
    Logger.base.info(f'🎧 [BookMyEvent] App is listening on port: {settings.PORT}')
    uvicorn.run('src.main:app', host='0.0.0.0', port=settings.PORT, reload=settings.DEBUG)
