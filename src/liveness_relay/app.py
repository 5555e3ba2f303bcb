"""FastAPI application with lifespan, root and health endpoints."""

from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from liveness_relay.config import get_settings
from liveness_relay.intercom import IntercomDispatcher
from liveness_relay.logging_config import configure_logging
from liveness_relay.slack.orchestrator import ConfirmationOrchestrator
from liveness_relay.slack.router import router as slack_router
from liveness_relay.sumsub import SumsubLinkProvider


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: configure logging, build components from settings."""
    settings = get_settings()
    configure_logging(settings.log_level)
    async with httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds)
    ) as http_client:
        app.state.settings = settings
        app.state.orchestrator = ConfirmationOrchestrator(
            settings,
            link_provider=SumsubLinkProvider(settings, http_client),
            dispatcher=IntercomDispatcher(settings, http_client),
        )
        yield


app = FastAPI(
    title="Liveness Relay",
    lifespan=lifespan,
)
app.include_router(slack_router)


@app.get("/", response_class=PlainTextResponse)
async def root() -> str:
    """Liveness probe for the hosting platform."""
    return "Slack Liveness Bot Running"


@app.get("/health")
async def health():
    """Health check endpoint for the hosting platform and local development."""
    return {
        "status": "ok",
        "service": "liveness-relay",
        "version": "0.1.0",
    }
