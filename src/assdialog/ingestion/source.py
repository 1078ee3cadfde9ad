"""Opening input/output streams and reading bounded lines.

Named inputs are read as UTF-8 (a BOM is tolerated).  Scripts saved in a
legacy code page are detected with charset-normalizer and reopened with the
detected encoding.  Stray bytes that fit no encoding are carried through
with ``surrogateescape``, so one damaged line never rejects the whole file.
"""

from __future__ import annotations

import codecs
import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Optional, TextIO

from charset_normalizer import from_path

from assdialog.errors import InputOpenError, OutputOpenError

logger = logging.getLogger(__name__)

STDIO_MARKER = "-"

# Undecodable input bytes travel as lone surrogates and are written back unchanged.
UNDECODABLE = "surrogateescape"


def _is_stdio(path: Optional[Path]) -> bool:
    return path is None or str(path) == STDIO_MARKER


def detect_encoding(path: Path) -> str:
    """Return the encoding to read *path* with.

    ``"utf-8-sig"`` when the file decodes as UTF-8, otherwise the
    charset-normalizer guess.  A UTF-8 script with a few stray bytes, where
    no other code page fits better, is still read as ``"utf-8-sig"``; the
    stream is opened with ``surrogateescape`` so those bytes only affect the
    lines that contain them.

    Raises ``InputOpenError`` only if the file cannot be read.
    """
    try:
        with path.open("r", encoding="utf-8-sig") as fh:
            for _ in fh:
                pass
        return "utf-8-sig"
    except UnicodeDecodeError:
        pass
    except OSError as exc:
        raise InputOpenError(path, exc.strerror or str(exc)) from exc

    # UTF-8 failed; let charset-normalizer guess
    best = from_path(path).best()
    if best is None or codecs.lookup(best.encoding).name == "utf-8":
        logger.info("%s has undecodable bytes, reading as UTF-8 and keeping them as-is", path.name)
        return "utf-8-sig"
    logger.info("%s is not UTF-8, reading as %s", path.name, best.encoding)
    return best.encoding


@contextmanager
def open_source(path: Optional[Path]) -> Iterator[TextIO]:
    """Yield a text stream for *path*; stdin when *path* is ``None`` or ``"-"``.

    stdin is never closed; named files are closed on exit.
    """
    if _is_stdio(path):
        yield sys.stdin
        return
    encoding = detect_encoding(path)
    try:
        stream = path.open("r", encoding=encoding, errors=UNDECODABLE)
    except OSError as exc:
        raise InputOpenError(path, exc.strerror or str(exc)) from exc
    with stream:
        yield stream


@contextmanager
def open_sink(path: Optional[Path]) -> Iterator[TextIO]:
    """Yield a writable text stream; stdout when *path* is ``None`` or ``"-"``.

    Files are written as UTF-8 with no newline translation, so rendered
    records reach disk exactly as the template produced them.  Input bytes
    that could not be decoded are written back verbatim.
    """
    if _is_stdio(path):
        yield sys.stdout
        return
    try:
        stream = path.open("w", encoding="utf-8", errors=UNDECODABLE, newline="")
    except OSError as exc:
        raise OutputOpenError(path, exc.strerror or str(exc)) from exc
    with stream:
        yield stream


def read_bounded_lines(stream: TextIO, limit: Optional[int] = None) -> Iterator[str]:
    """Yield lines of at most *limit* characters, terminator included.

    A physical line longer than *limit* comes back as several chunks; only
    the first can start with ``Dialogue:``.
    """
    size = -1 if limit is None else limit
    while True:
        chunk = stream.readline(size)
        if not chunk:
            return
        yield chunk
