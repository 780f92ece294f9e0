"""Exception types raised by the truecasing core.

WHY: Callers (CLI, HTTP service, tests) need typed exceptions to tell a
corrupt model file apart from a programming error such as reusing a
consumed trainer.

RULES:
- Every core exception derives from TruecaserError
- SerializationError is always surfaced to the caller, never recovered locally
- Underlying exceptions are chained with ``raise ... from``
"""

from __future__ import annotations


class TruecaserError(Exception):
    """Base class for all truecaser errors."""


class SerializationError(TruecaserError):
    """Raised when a model cannot be encoded, or persisted data cannot be decoded.

    WHY: A malformed or incompatible model file must never produce a
    silently half-working model.

    RULES:
    - Raised by Model.to_bytes / Model.from_bytes and the stream helpers
    - The message names what was wrong; the cause is chained
    """


class TrainerConsumedError(TruecaserError, RuntimeError):
    """Raised when a ModelTrainer is used after into_model() consumed it."""
