"""Command-line interface for training and applying truecasing models.

WHY: The two everyday jobs, building a model from a corpus and running
it over text, should be one command each and compose with shell pipes.

HOW: argparse with two subcommands:
  train     — read sentence-per-line files, train, write the model file
  truecase  — load a model, truecase input line by line, write the output
Status messages go to stderr so stdout stays clean for piping.

RULES:
- train: -o/--output MODEL (required), -i/--input FILE... (required,
  repeatable); --jobs N trains one shard per file in N processes
- truecase: -m/--model MODEL (default TRUECASER_MODEL_PATH),
  -i/--input (default stdin), -o/--output (default stdout),
  --unknown-words preserve|lowercase (default TRUECASER_UNKNOWN_WORDS)
- Each line is truecased as one sentence; line endings are preserved,
  including on stdin/stdout (which are rewrapped, never closed)
- Exit codes: 0 = success, 1 = error, 130 = interrupted
- Errors are printed as one "Error: ..." line on stderr
"""

from __future__ import annotations

import argparse
import io
import logging
import sys
from concurrent.futures import ProcessPoolExecutor
from pathlib import Path
from typing import List, Optional, TextIO

from truecaser import __version__
from truecaser.config import (
    DEFAULT_ENCODING,
    DEFAULT_MODEL_PATH,
    DEFAULT_UNKNOWN_WORDS,
    load_log_level,
    load_unknown_word_policy,
)
from truecaser.core.errors import TruecaserError
from truecaser.core.model import Model, UnknownWordPolicy
from truecaser.core.statistics import CasingStatistics
from truecaser.core.trainer import ModelTrainer
from truecaser.corpus import STDIN_PATH, statistics_from_file
from truecaser.storage import load_model, save_model

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr.

    WHY: Status output must not pollute stdout so the CLI can be piped.
    """
    print(msg, file=sys.stderr, flush=True)


# ---------------------------------------------------------------------------
# train
# ---------------------------------------------------------------------------


def train_statistics(inputs: List[str], jobs: int = 1) -> CasingStatistics:
    """Build merged casing statistics for a list of corpus files.

    WHY: Large corpora are usually split over several files. Counting is
    commutative, so each file can be a separate shard.

    HOW: With jobs > 1 and more than one file, files are mapped over a
    process pool and the shards merged. Otherwise files are read in order
    into a single trainer. Stdin ("-") is always read in this process.

    RULES:
    - The merged result is identical regardless of jobs
    """
    logger.debug("Training %d file(s) with %d job(s)", len(inputs), jobs)
    if jobs > 1 and len(inputs) > 1 and STDIN_PATH not in inputs:
        with ProcessPoolExecutor(max_workers=jobs) as pool:
            shards = list(pool.map(statistics_from_file, inputs))
        for path, shard in zip(inputs, shards):
            _status("  {}: {} sentences".format(path, shard.sentence_count))
        return CasingStatistics.merged(shards)

    trainer = ModelTrainer()
    for path in inputs:
        count = trainer.add_sentences_from_file(path)
        _status("  {}: {} sentences".format(path, count))
    return trainer.statistics


def _run_train(args: argparse.Namespace) -> None:
    output_path = Path(args.output)
    _status("Training from {} file(s)...".format(len(args.input)))
    stats = train_statistics(args.input, jobs=args.jobs)

    model = ModelTrainer.from_statistics(stats).into_model()
    save_model(model, output_path)
    _status("Done! {} words from {} sentences saved to {}".format(
        len(model), stats.sentence_count, output_path))


# ---------------------------------------------------------------------------
# truecase
# ---------------------------------------------------------------------------


def truecase_stream(
    model: Model,
    source: TextIO,
    sink: TextIO,
    unknown_words: UnknownWordPolicy,
) -> int:
    """Truecase every line of ``source`` into ``sink``; returns the line count.

    RULES:
    - Each line is one sentence
    - The line ending (\\n, \\r\\n or none on the last line) is written back unchanged
    """
    count = 0
    for line in source:
        body = line.rstrip("\r\n")
        ending = line[len(body):]
        sink.write(model.truecase(body, unknown_words=unknown_words))
        sink.write(ending)
        count += 1
    return count


def _untranslated(stream: TextIO) -> TextIO:
    """Rewrap a standard stream so \\r\\n passes through unchanged.

    Streams without a byte buffer (e.g. io.StringIO) are returned as-is.
    """
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        return stream
    stream.flush()
    return io.TextIOWrapper(buffer, encoding=DEFAULT_ENCODING, newline="")


def _release(stream: TextIO, default: TextIO) -> None:
    """Close a stream opened by _open_text without closing the standard one."""
    if stream is default:
        stream.flush()
    elif isinstance(stream, io.TextIOWrapper) and stream.buffer is getattr(default, "buffer", None):
        stream.flush()
        stream.detach()
    else:
        stream.close()


def _open_text(path: Optional[str], mode: str, default: TextIO) -> TextIO:
    if path is None or path == STDIN_PATH:
        return _untranslated(default)
    try:
        return open(path, mode, encoding=DEFAULT_ENCODING, newline="")
    except OSError as exc:
        action = "read input" if "r" in mode else "write output"
        raise OSError("Could not {} file {}: {}".format(
            action, path, exc.strerror or exc)) from exc


def _run_truecase(args: argparse.Namespace) -> None:
    unknown_words = load_unknown_word_policy(args.unknown_words)
    model = load_model(Path(args.model))
    _status("Loaded model {} ({} words)".format(args.model, len(model)))

    source = _open_text(args.input, "r", sys.stdin)
    try:
        sink = _open_text(args.output, "w", sys.stdout)
        try:
            count = truecase_stream(model, source, sink, unknown_words)
        finally:
            _release(sink, sys.stdout)
    finally:
        _release(source, sys.stdin)
    _status("Truecased {} line(s)".format(count))


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable: tests can inspect the parser without running anything.
    """
    parser = argparse.ArgumentParser(
        prog="truecaser",
        description="Train a truecasing model, or use one to truecase text.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level for library messages (default: TRUECASER_LOG_LEVEL or WARNING).",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    train = subparsers.add_parser(
        "train",
        help="Create a truecasing model based on training data.",
    )
    train.add_argument(
        "-o", "--output",
        required=True,
        metavar="FILE",
        help="File where the newly trained model will be written.",
    )
    train.add_argument(
        "-i", "--input",
        required=True,
        nargs="+",
        action="extend",
        metavar="FILE",
        help="File containing training data, one sentence per line ('-' for stdin). "
             "Can be given multiple times.",
    )
    train.add_argument(
        "--jobs",
        type=int,
        default=1,
        help="Number of worker processes, one shard per input file (default: %(default)s).",
    )
    train.set_defaults(handler=_run_train)

    truecase = subparsers.add_parser(
        "truecase",
        help="Truecase text line by line using a trained model.",
    )
    truecase.add_argument(
        "-m", "--model",
        default=DEFAULT_MODEL_PATH,
        metavar="FILE",
        help="Trained model file (default: %(default)s).",
    )
    truecase.add_argument(
        "-i", "--input",
        default=None,
        metavar="FILE",
        help="Input file, one sentence per line (default: stdin).",
    )
    truecase.add_argument(
        "-o", "--output",
        default=None,
        metavar="FILE",
        help="Output file (default: stdout).",
    )
    truecase.add_argument(
        "--unknown-words",
        default=DEFAULT_UNKNOWN_WORDS,
        choices=[p.value for p in UnknownWordPolicy],
        help="How to case words the model has never seen (default: %(default)s).",
    )
    truecase.set_defaults(handler=_run_truecase)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        logging.basicConfig(
            level=load_log_level(args.log_level),
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )
        args.handler(args)
    except KeyboardInterrupt:
        _status("\nCancelled by user.")
        sys.exit(130)
    except (TruecaserError, OSError, ValueError) as e:
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
