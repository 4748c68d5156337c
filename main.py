import inspect
import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request

from routes.session_route import router as session_router
from services.design.orchestrator import DesignOrchestrator
from services.design.session_service import DesignSessionService
from services.design.session_store import SessionStore
from services.design.styles import DESIGN_STYLES
from services.openai.model_client import OpenAIModelClient, create_openai_client
from utils.settings import ModelSettings, max_upload_bytes

load_dotenv()  # Load environment variables from .env file if present

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
LOGGER = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan manager to initialize:
      - the OpenAI async client and the model client built on it
      - the design orchestrator and in-memory session store
    and attach them to `app.state`.
    """
    settings = ModelSettings.from_env()

    try:
        openai_client = create_openai_client(settings)
    except Exception as exc:
        raise RuntimeError("Failed to initialize OpenAI Async client") from exc

    app.state.openai_client = openai_client
    configure_state(app, OpenAIModelClient(openai_client, settings))
    LOGGER.info(
        "Design assistant ready (text model %s, image model %s)",
        settings.text_model,
        settings.image_model,
    )

    try:
        yield
    finally:
        # Gracefully close the OpenAI client if it exposes a close/aclose method.
        client = getattr(app.state, "openai_client", None)
        if client is not None:
            aclose = getattr(client, "aclose", None) or getattr(client, "close", None)
            if aclose is not None:
                try:
                    if inspect.iscoroutinefunction(aclose):
                        await aclose()
                    else:
                        result = aclose()
                        if inspect.isawaitable(result):
                            await result
                except Exception as exc:
                    LOGGER.warning("Error while closing OpenAI client: %s", exc)


def configure_state(app: FastAPI, model_client) -> None:
    """Attach the orchestration stack for ``model_client`` to `app.state`."""
    store = SessionStore()
    app.state.model_client = model_client
    app.state.session_store = store
    app.state.session_service = DesignSessionService(store, DesignOrchestrator.from_model_client(model_client))
    app.state.max_upload_bytes = max_upload_bytes()


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application instance.
    """
    app = FastAPI(lifespan=lifespan)

    @app.get("/health")
    async def health(request: Request):
        """
        Simple health check that reports whether the model client is configured.
        """
        has_model = getattr(request.app.state, "model_client", None) is not None
        return {"ok": True, "model_available": has_model}

    @app.get("/styles")
    async def styles():
        """List the selectable design styles."""
        return {"styles": DESIGN_STYLES}

    app.include_router(session_router)

    return app


app = create_app()
