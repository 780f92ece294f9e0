"""Reading training sentences from files and streams.

WHY: The trainer only needs "a sequence of sentence strings". Where they
come from (one file, many files, stdin) is the caller's business, and
I/O failures must reach the user with the file name and the operation
that failed attached.

HOW: iter_sentences() opens a sentence-per-line text file (or stdin for
"-") and yields its non-blank lines. read_sentences() does the same for
an already-open stream. statistics_from_file() trains a single shard
from one file so several files can be processed in parallel and merged.

RULES:
- One sentence per line; blank lines are skipped
- Line endings and surrounding whitespace are stripped
- Files are decoded with TRUECASER_ENCODING (default utf-8)
- Open/read/decode failures raise CorpusReadError naming path and operation
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterator, Optional, TextIO, Union

from truecaser.config import DEFAULT_ENCODING
from truecaser.core.errors import TruecaserError
from truecaser.core.statistics import CasingStatistics
from truecaser.core.trainer import ModelTrainer

logger = logging.getLogger(__name__)

STDIN_PATH = "-"


class CorpusReadError(TruecaserError):
    """Raised when a training corpus cannot be opened, read or decoded.

    WHY: "No such file" is not enough when ten files were given; the
    message always says which file and which step failed.

    RULES:
    - path: the file that failed ("-" for stdin)
    - operation: "open", "read" or "decode"
    - The underlying OSError / UnicodeDecodeError is chained
    """

    def __init__(self, path: Union[str, Path], operation: str, reason: str) -> None:
        self.path = str(path)
        self.operation = operation
        super().__init__("Could not {} corpus file {}: {}".format(operation, self.path, reason))


def read_sentences(stream: TextIO) -> Iterator[str]:
    """Yield the non-blank, stripped lines of an open text stream."""
    for line in stream:
        sentence = line.strip()
        if sentence:
            yield sentence


def iter_sentences(
    path: Union[str, Path],
    encoding: Optional[str] = None,
) -> Iterator[str]:
    """Yield training sentences from a sentence-per-line file.

    Args:
        path: File path, or "-" for standard input.
        encoding: Text encoding; defaults to TRUECASER_ENCODING.

    Raises:
        CorpusReadError: The file could not be opened, read or decoded.
    """
    logger.debug("Reading sentences from %s", path)
    if str(path) == STDIN_PATH:
        yield from _guarded(path, read_sentences(sys.stdin))
        return

    try:
        stream = open(path, "r", encoding=encoding or DEFAULT_ENCODING)
    except OSError as exc:
        raise CorpusReadError(path, "open", exc.strerror or str(exc)) from exc

    with stream:
        yield from _guarded(path, read_sentences(stream))


def _guarded(path: Union[str, Path], sentences: Iterator[str]) -> Iterator[str]:
    """Re-raise read/decode failures of ``sentences`` as CorpusReadError."""
    try:
        yield from sentences
    except UnicodeDecodeError as exc:
        raise CorpusReadError(path, "decode", str(exc)) from exc
    except OSError as exc:
        raise CorpusReadError(path, "read", exc.strerror or str(exc)) from exc


def statistics_from_file(path: Union[str, Path]) -> CasingStatistics:
    """Train one statistics shard from one file.

    WHY: Parallel training runs one shard per file in a worker process
    and merges the results; this is the picklable unit of work.
    """
    trainer = ModelTrainer()
    trainer.add_sentences_from_file(path)
    return trainer.statistics
