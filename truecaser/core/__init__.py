"""Core truecasing modules: tokenizer, statistics, trainer, model.

WHY: The core package holds the statistical heart of the truecaser and
nothing else. It performs no file, network or console I/O so it can be
embedded in the CLI, the HTTP service, or any other application.

HOW: tokens.py and tokenizer.py define how a sentence is split and
rebuilt; statistics.py and trainer.py turn sentences into casing
decisions; model.py applies them; serialization.py defines the
persisted byte layout.

RULES:
- Only the trainer holds mutable state, and only until into_model()
- Models are immutable and safe to share between threads
- Errors are the types in errors.py
"""

from truecaser.core.errors import SerializationError, TrainerConsumedError, TruecaserError
from truecaser.core.model import Model, UnknownWordPolicy
from truecaser.core.statistics import CasingStatistics
from truecaser.core.tokenizer import detokenize, tokenize
from truecaser.core.tokens import Separator, Token, Word
from truecaser.core.trainer import ModelTrainer

__all__ = [
    "CasingStatistics",
    "Model",
    "ModelTrainer",
    "Separator",
    "SerializationError",
    "Token",
    "TrainerConsumedError",
    "TruecaserError",
    "UnknownWordPolicy",
    "Word",
    "detokenize",
    "tokenize",
]
