"""Pydantic request/response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for request validation,
response serialization, and automatic OpenAPI documentation.

HOW: One model per request/response body. All fields carry
Field(description=...) so the /docs page is self-explanatory.

RULES:
- unknown_words values match UnknownWordPolicy exactly
- Responses never expose the model's internal tables
- Python 3.9+ compatible (no PEP 604 unions, use Optional from typing)
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from truecaser.core.model import UnknownWordPolicy


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class TruecaseRequest(BaseModel):
    """Sentences to truecase.

    RULES:
    - Each list item is one sentence, decoded independently
    - unknown_words defaults to the server's configured policy
    """

    sentences: List[str] = Field(
        description="Sentences to truecase, one per item.",
    )
    unknown_words: Optional[UnknownWordPolicy] = Field(
        default=None,
        description="Fallback for words the model has never seen: 'preserve' or 'lowercase'.",
    )

    model_config = {"json_schema_extra": {
        "examples": [
            {"sentences": ["the cat saw nasa launch a rocket"], "unknown_words": "preserve"}
        ]
    }}


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class TruecaseResponse(BaseModel):
    """Truecased sentences, in request order."""

    sentences: List[str] = Field(description="Truecased sentences, same order as the request.")


class ModelInfo(BaseModel):
    """Summary of the loaded model."""

    vocabulary_size: int = Field(description="Number of distinct lowercased words the model knows.")
    model_path: Optional[str] = Field(
        default=None,
        description="File the model was loaded from, if any.",
    )


class ErrorResponse(BaseModel):
    """Standard error response body."""

    detail: str = Field(description="Human-readable error description.")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service health status.", json_schema_extra={"example": "ok"})
    version: str = Field(description="API version string.", json_schema_extra={"example": "0.1.0"})
