"""Model files on disk.

WHY: The core defines the model's byte layout but never touches the
filesystem. The CLI and the HTTP service both need to move those bytes
to and from a file, with the file name attached to any failure.

RULES:
- Files are opened in binary mode; the bytes are exactly Model.to_bytes()
- OS failures are re-raised as the same OSError subclass and errno,
  naming the file and the operation
- Corrupt content is re-raised as SerializationError naming the file
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

from truecaser.core.errors import SerializationError
from truecaser.core.model import Model


def _with_path(exc: OSError, action: str, path: Union[str, Path]) -> OSError:
    """Copy of ``exc`` (same subclass and errno) whose message names the file."""
    if exc.errno is None:
        return type(exc)("{} {}: {}".format(action, path, exc))
    # str() of the result appends the filename
    return type(exc)(exc.errno, "{}: {}".format(action, exc.strerror), str(path))


def save_model(model: Model, path: Union[str, Path]) -> None:
    """Write a model file, attaching the path to any OS error."""
    try:
        with open(path, "wb") as stream:
            model.save(stream)
    except OSError as exc:
        raise _with_path(exc, "Could not write model file", path) from exc


def load_model(path: Union[str, Path]) -> Model:
    """Read a model file, attaching the path to any failure."""
    try:
        with open(path, "rb") as stream:
            return Model.load(stream)
    except OSError as exc:
        raise _with_path(exc, "Could not read model file", path) from exc
    except SerializationError as exc:
        raise SerializationError("Invalid model file {}: {}".format(path, exc)) from exc
