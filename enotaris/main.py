import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException

# Load env from the working directory's .env before settings are read
if "PYTEST_CURRENT_TEST" not in os.environ:
    load_dotenv()

from enotaris.api import cases, clients, health, metrics, review, tasks  # noqa: E402
from enotaris.client.http import ApiClient  # noqa: E402
from enotaris.core.config import settings, validate_config  # noqa: E402
from enotaris.core.errors import (  # noqa: E402
    AppError,
    app_error_handler,
    http_error_handler,
    unhandled_exception_handler,
    validation_error_handler,
)
from enotaris.core.logging import configure_logging  # noqa: E402
from enotaris.core.middleware.metrics import MetricsMiddleware  # noqa: E402
from enotaris.core.middleware.request_id import RequestIdMiddleware  # noqa: E402
from enotaris.core.middleware.tracing import TracingMiddleware  # noqa: E402
from enotaris.core.tracing import setup_tracing  # noqa: E402

configure_logging(settings.ENV, settings.LOG_LEVEL)
validate_config(strict=settings.CONFIG_STRICT)
setup_tracing(enabled=settings.OTEL_ENABLED)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger = logging.getLogger("enotaris")
    logger.info("Starting enotaris BFF (backend %s)", settings.api_base_url)
    owns_client = getattr(app.state, "api", None) is None
    if owns_client:
        app.state.api = ApiClient()
    try:
        yield
    finally:
        if owns_client:
            await app.state.api.aclose()
            app.state.api = None
        logger.info("Stopping enotaris BFF...")


app = FastAPI(title="enotaris BFF", lifespan=lifespan)

# Last added runs outermost, so the request id is bound before metrics and spans
app.add_middleware(TracingMiddleware)
app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestIdMiddleware)

app.add_exception_handler(AppError, app_error_handler)
app.add_exception_handler(HTTPException, http_error_handler)
app.add_exception_handler(RequestValidationError, validation_error_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)

origins = settings.cors_origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials="*" not in origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(metrics.router)
app.include_router(cases.router)
app.include_router(clients.router)
app.include_router(tasks.router)
app.include_router(review.router)


def run() -> None:
    import uvicorn

    uvicorn.run("enotaris.main:app", host=os.getenv("HOST", "127.0.0.1"), port=int(os.getenv("PORT", "8000")))


if __name__ == "__main__":
    run()
