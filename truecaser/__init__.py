"""Truecaser: statistical letter-case restoration.

WHY: Text coming out of speech recognition, OCR, or lowercased NLP
pipelines has lost its casing. This package learns casing patterns from
correctly cased example sentences and restores them in new text.

HOW: Three stages: train (ModelTrainer accumulates per-word casing
statistics), freeze (into_model() keeps one casing decision per word),
decode (Model.truecase re-cases a sentence token by token). Models are
persisted as small JSON documents.

RULES:
- Only letter casing of word tokens ever changes; separators pass through
- Trained models are immutable and safe to share between threads
- File, console and HTTP I/O live outside truecaser.core
"""

from truecaser.core import (
    CasingStatistics,
    Model,
    ModelTrainer,
    SerializationError,
    TrainerConsumedError,
    TruecaserError,
    UnknownWordPolicy,
    detokenize,
    tokenize,
)

__version__ = "0.1.0"

__all__ = [
    "CasingStatistics",
    "Model",
    "ModelTrainer",
    "SerializationError",
    "TrainerConsumedError",
    "TruecaserError",
    "UnknownWordPolicy",
    "detokenize",
    "tokenize",
    "__version__",
]
