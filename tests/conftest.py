"""Shared test fixtures for the truecaser test suite.

WHY: Most test modules need the same small training corpus and the
model trained from it. Centralizing them here keeps expectations in one
place.

HOW: Pytest fixtures provide the raw sentences, a trained Model, and a
model file written to tmp_path.

RULES:
- SCENARIO_SENTENCES is the reference three-sentence scenario
- CORPUS_SENTENCES adds acronyms, proper nouns and positional capitals
"""

from typing import List

import pytest

from truecaser.core.model import Model
from truecaser.core.trainer import ModelTrainer
from truecaser.storage import save_model


SCENARIO_SENTENCES: List[str] = [
    "The cat sat.",
    "A cat meowed.",
    "NASA launched a rocket.",
]

CORPUS_SENTENCES: List[str] = [
    "The summit was hosted by NATO in Brussels.",
    "NATO leaders met the press on Monday.",
    "Officials from the EU and NATO spoke.",
    "Paris is the capital of France.",
    "She moved to Paris last year.",
    "The new station opened in New York.",
    "New rules apply from Monday.",
    "I think the plan will work.",
    "He said I should go.",
    "Don't forget the iPhone in the car.",
    "They bought an iPhone yesterday.",
    "The weather is nice.",
    "We like the weather in spring.",
]

# Sentences that are cased the way CORPUS_SENTENCES teaches.
CORRECTLY_CASED: List[str] = [
    "The summit was hosted by NATO in Brussels.",
    "NATO leaders met the press on Monday.",
    "She moved to Paris last year.",
    "They bought an iPhone yesterday.",
    "We like the weather in spring.",
]


def train(sentences: List[str]) -> Model:
    trainer = ModelTrainer()
    trainer.add_sentences(sentences)
    return trainer.into_model()


@pytest.fixture
def scenario_model() -> Model:
    """Model trained on the three reference sentences."""
    return train(SCENARIO_SENTENCES)


@pytest.fixture
def corpus_model() -> Model:
    """Model trained on the richer CORPUS_SENTENCES."""
    return train(CORPUS_SENTENCES)


@pytest.fixture
def corpus_file(tmp_path):
    """CORPUS_SENTENCES written one per line, with a blank line mixed in."""
    path = tmp_path / "corpus.txt"
    lines = CORPUS_SENTENCES[:5] + [""] + CORPUS_SENTENCES[5:]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def model_file(tmp_path, corpus_model):
    """corpus_model saved to disk."""
    path = tmp_path / "model.json"
    save_model(corpus_model, path)
    return path


@pytest.fixture
def scenario_sentences() -> List[str]:
    return list(SCENARIO_SENTENCES)


@pytest.fixture
def corpus_sentences() -> List[str]:
    return list(CORPUS_SENTENCES)


@pytest.fixture
def correctly_cased() -> List[str]:
    return list(CORRECTLY_CASED)
