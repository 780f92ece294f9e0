"""Byte layout of a persisted casing model.

WHY: A trained model is written once and loaded many times, often by a
different process or machine. The persisted form must be small, stable
across releases, and rejected loudly when it is corrupt.

HOW: The model is a JSON object validated by a Pydantic record:

    {"best_casing": {"nasa": "NASA", "the": "the", ...}}

Keys are written sorted so that equal models produce identical bytes.
Decoding validates the structure and the key/form invariant before a
Model is ever built from it.

RULES:
- Encoding: UTF-8 JSON, keys sorted, no insignificant whitespace
- Unknown top-level fields are rejected (extra="forbid")
- Every key must equal the lowercase fold of its form
- Any failure is raised as SerializationError, chained to the cause
"""

from __future__ import annotations

from typing import Dict, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from truecaser.core.errors import SerializationError


class ModelRecord(BaseModel):
    """Persisted representation of a Model."""

    model_config = ConfigDict(extra="forbid")

    best_casing: Dict[str, str] = Field(
        description="Lowercased word mapped to its learned casing-form.",
    )

    @field_validator("best_casing")
    @classmethod
    def _forms_match_keys(cls, value: Dict[str, str]) -> Dict[str, str]:
        for key, form in value.items():
            if not key or form.lower() != key:
                raise ValueError(
                    "casing-form {!r} does not belong to key {!r}".format(form, key)
                )
        return value


def encode_model(best_casing: Mapping[str, str]) -> bytes:
    """Serialize a best-casing mapping to bytes.

    Raises:
        SerializationError: The mapping cannot be represented (e.g. a key
            that does not match its form, or text that is not valid UTF-8).
    """
    try:
        record = ModelRecord(best_casing={k: best_casing[k] for k in sorted(best_casing)})
        return record.model_dump_json().encode("utf-8")
    except ValueError as exc:
        # ValidationError, PydanticSerializationError and UnicodeError are ValueErrors
        raise SerializationError("Model cannot be encoded: {}".format(exc)) from exc


def decode_model(data: bytes) -> Dict[str, str]:
    """Parse persisted bytes back into a best-casing mapping.

    Raises:
        SerializationError: The data is not a valid persisted model.
    """
    if not isinstance(data, (bytes, bytearray)):
        raise SerializationError(
            "Expected bytes, got {}".format(type(data).__name__)
        )
    try:
        record = ModelRecord.model_validate_json(bytes(data))
    except ValidationError as exc:
        raise SerializationError("Malformed model data: {}".format(exc)) from exc
    return record.best_casing
