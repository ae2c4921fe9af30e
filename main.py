import inspect
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from openai import AsyncOpenAI

from routes.report_route import router as report_router
from services.assistants.gateway import OpenAIAssistantsGateway
from utils.logging_setup import configure_logging
from utils.settings import get_settings

from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file if present

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan manager to initialize:
      - settings and console logging
      - the OpenAI async client and the assistants gateway built on it
    and attach them to `app.state`.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    app.state.settings = settings

    if not settings.openai_api_key:
        raise RuntimeError("OPENAI_API_KEY environment variable is not set")
    if not settings.assistant_id:
        logger.warning("ASSISTANT_ID is not set; report generation requests will fail.")

    try:
        openai_client = AsyncOpenAI(api_key=settings.openai_api_key)
    except Exception as exc:
        raise RuntimeError("Failed to initialize OpenAI Async client") from exc

    app.state.openai_client = openai_client
    app.state.assistants_gateway = OpenAIAssistantsGateway(openai_client)

    try:
        yield
    finally:
        # Gracefully close the OpenAI client if it exposes a close/aclose method.
        client = getattr(app.state, "openai_client", None)
        if client is not None:
            aclose = getattr(client, "aclose", None) or getattr(client, "close", None)
            if aclose is not None:
                try:
                    result = aclose()
                    if inspect.isawaitable(result):
                        await result
                except Exception as exc:  # pylint: disable=broad-exception-caught
                    logger.warning("Error closing OpenAI client: %s", exc)


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application instance.
    """
    app = FastAPI(lifespan=lifespan)

    @app.get("/health")
    async def health(request: Request):
        """
        Simple health check that reports whether the OpenAI client and assistant are configured.
        """
        has_openai = getattr(request.app.state, "openai_client", None) is not None
        settings = getattr(request.app.state, "settings", None)
        has_assistant = bool(settings and settings.assistant_id)
        return {"ok": True, "openai_available": has_openai, "assistant_configured": has_assistant}

    @app.get("/status")
    async def status():
        """
        Simple liveness check.
        """
        return {"status": "up"}

    # Register application routers
    app.include_router(report_router)

    return app


app = create_app()
