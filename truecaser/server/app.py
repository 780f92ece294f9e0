"""FastAPI application serving a trained truecasing model.

WHY: Other services need truecasing as a network call. The model is
immutable, so one loaded copy can serve every request concurrently.

HOW: The model is loaded once at startup from TRUECASER_MODEL_PATH into
a module-level slot. POST /truecase decodes a batch of sentences; GET
/model and GET /health report on the service. Decoding endpoints are
plain ``def`` functions so FastAPI runs them in its worker threadpool.

RULES:
- All endpoints have OpenAPI summaries, descriptions and tags
- Requests arriving before a model is loaded get HTTP 503
- A missing or unreadable model file is logged, not fatal
- The unknown-word policy defaults to TRUECASER_UNKNOWN_WORDS, read once
  at startup; an invalid value is logged and "preserve" is used
- Python 3.9+ compatible (no match/case, no PEP 604 unions)
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, HTTPException

from truecaser import __version__
from truecaser.config import DEFAULT_MODEL_PATH, load_unknown_word_policy
from truecaser.core.errors import TruecaserError
from truecaser.core.model import DEFAULT_UNKNOWN_WORD_POLICY, Model, UnknownWordPolicy
from truecaser.server.models import (
    ErrorResponse,
    HealthResponse,
    ModelInfo,
    TruecaseRequest,
    TruecaseResponse,
)
from truecaser.storage import load_model

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# App and model setup
# ---------------------------------------------------------------------------


@dataclass
class ModelSlot:
    """The served model, its source file and the default unknown-word policy."""

    model: Optional[Model] = None
    path: Optional[str] = None
    unknown_words: UnknownWordPolicy = DEFAULT_UNKNOWN_WORD_POLICY

    def load(self, path: str) -> None:
        self.model = load_model(path)
        self.path = path


model_slot = ModelSlot()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Resolve settings and load the configured model on startup."""
    try:
        model_slot.unknown_words = load_unknown_word_policy()
    except ValueError:
        logger.exception(
            "Bad TRUECASER_UNKNOWN_WORDS; using '%s'", DEFAULT_UNKNOWN_WORD_POLICY.value)
        model_slot.unknown_words = DEFAULT_UNKNOWN_WORD_POLICY
    if model_slot.model is None:
        if Path(DEFAULT_MODEL_PATH).is_file():
            try:
                model_slot.load(DEFAULT_MODEL_PATH)
            except (TruecaserError, OSError):
                logger.exception("Could not load model %s; /truecase will return 503", DEFAULT_MODEL_PATH)
            else:
                logger.info("Serving model %s (%d words)", DEFAULT_MODEL_PATH, len(model_slot.model))
        else:
            logger.warning("Model file %s not found; /truecase will return 503", DEFAULT_MODEL_PATH)
    yield


app = FastAPI(
    lifespan=lifespan,
    title="Truecaser API",
    description=(
        "Restore letter casing to lowercase or arbitrarily cased sentences "
        "using a statistical truecasing model."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


def _require_model() -> Model:
    if model_slot.model is None:
        raise HTTPException(status_code=503, detail="No truecasing model loaded")
    return model_slot.model


# ---------------------------------------------------------------------------
# Endpoints: Truecasing
# ---------------------------------------------------------------------------


@app.post(
    "/truecase",
    response_model=TruecaseResponse,
    tags=["truecase"],
    summary="Truecase sentences",
    description=(
        "Restore casing for each sentence in the request. Sentences are "
        "decoded independently and returned in the same order."
    ),
    responses={
        503: {"model": ErrorResponse, "description": "No model loaded"},
    },
)
def truecase(request: TruecaseRequest) -> TruecaseResponse:
    model = _require_model()
    policy = request.unknown_words or model_slot.unknown_words
    return TruecaseResponse(
        sentences=[model.truecase(s, unknown_words=policy) for s in request.sentences],
    )


@app.get(
    "/model",
    response_model=ModelInfo,
    tags=["model"],
    summary="Describe the loaded model",
    description="Returns the vocabulary size and source file of the model being served.",
    responses={
        503: {"model": ErrorResponse, "description": "No model loaded"},
    },
)
def model_info() -> ModelInfo:
    model = _require_model()
    return ModelInfo(vocabulary_size=len(model), model_path=model_slot.path)


# ---------------------------------------------------------------------------
# Endpoints: Health
# ---------------------------------------------------------------------------


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
    description="Liveness check for load balancers and orchestrators.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def run_api():
    """Entry point for the truecaser-api console script."""
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
