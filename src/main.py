"""
Production FastAPI Application

Run with: uvicorn src.main:app
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import dispose_engine, get_engine
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import TracingConfig


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Booking Service] Starting up...')

    tracing = TracingConfig(service_name=settings.OTEL_SERVICE_NAME)
    tracing.setup()
    Logger.base.info('📊 [Booking Service] OpenTelemetry tracing configured')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Booking Service] Dependency injection wired')

    if settings.STORAGE_BACKEND == 'postgres':
        tracing.instrument_sqlalchemy(engine=get_engine())
        Logger.base.info('🗄️  [Booking Service] Database engine ready + instrumented')
    else:
        Logger.base.warning('🧪 [Booking Service] In-memory storage: data is lost on restart')

    Logger.base.info('✅ [Booking Service] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Booking Service] Shutting down...')

    if settings.STORAGE_BACKEND == 'postgres':
        await dispose_engine()
        Logger.base.info('🗄️  [Booking Service] Database engine disposed')

    tracing.shutdown()
    container.unwire()

    Logger.base.info('👋 [Booking Service] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
