"""
FastAPI application exposing the summarization pipeline.
"""

import threading
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException

from .config import MODEL_LOAD_RETRIES, WARM_UP_MODEL, METRICS_PORT
from .exceptions import ModelLoadError, ResourceUnavailableError, SummarizationError
from .logging import configure_logging, get_logger
from .metrics import start_metrics_server
from .models import SummarizeRequest, SummarizeResponse
from .pipeline import Summarizer

logger = get_logger(__name__)


def _warm_up(summarizer: Summarizer) -> None:
    try:
        summarizer.embedding_provider.ensure_loaded()
    except ModelLoadError as e:
        logger.warning("Model warm-up failed; loading will be retried on first request", error=str(e))


def create_app(
    summarizer: Optional[Summarizer] = None,
    warm_up: bool = WARM_UP_MODEL,
    metrics_port: int = METRICS_PORT,
    load_retries: int = MODEL_LOAD_RETRIES,
) -> FastAPI:
    """
    Build the API around a Summarizer.

    Args:
        summarizer: Summarizer to serve; the process-wide default when None
        warm_up: Start loading the embedding model at startup
        metrics_port: Port for the Prometheus server (0 to disable)
        load_retries: Extra attempts when the model or synonym corpus fails to load; negative means 0

    Returns:
        The FastAPI application
    """
    summarizer = summarizer or Summarizer()
    load_retries = max(0, load_retries)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging()
        if metrics_port > 0 and start_metrics_server(metrics_port):
            logger.info("Metrics server started", port=metrics_port)
        if warm_up:
            threading.Thread(target=_warm_up, args=(summarizer,), daemon=True).start()
        yield

    app = FastAPI(
        title="BookSum Summarizer API",
        description="Extractive summarization of text documents",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.summarizer = summarizer

    @app.get("/")
    def read_root():
        """API root endpoint."""
        return {
            "message": "Welcome to BookSum Summarizer API",
            "endpoints": {
                "POST /summarize": "Summarize a text",
                "GET /health": "Embedding model state",
            }
        }

    @app.get("/health")
    def health():
        return {"status": "ok", "model_state": summarizer.embedding_provider.state}

    @app.post("/summarize", response_model=SummarizeResponse)
    def summarize_text(request: SummarizeRequest):
        """
        Summarize a text.

        Model and corpus load failures are retried up to load_retries times; other
        failures are not, as retrying the same text gives the same outcome.
        """
        for attempt in range(load_retries + 1):
            try:
                result = summarizer.summarize_detailed(request.text, request.max_sentences)
                break
            except ResourceUnavailableError as e:
                logger.warning("Resource unavailable", attempt=attempt + 1, error=str(e))
                if attempt == load_retries:
                    raise HTTPException(status_code=503, detail=f"Resource unavailable: {e}")
            except SummarizationError as e:
                raise HTTPException(status_code=500, detail=str(e))

        return SummarizeResponse(
            summary=result.summary,
            sentence_count=result.sentence_count,
            selected_count=result.summary_sentence_count,
            processing_time=result.processing_time,
        )

    return app


# uvicorn booksum.api:app
app = create_app()
