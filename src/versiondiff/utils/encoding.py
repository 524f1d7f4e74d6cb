#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/versiondiff/utils/encoding.py
"""Decoding of base and version files into text.

Text reaches the diff engine already decoded, and two files that hold the
same lines must decode to the same strings. A byte-order mark is therefore
consumed rather than left on line 1, and valid utf-8 is taken as utf-8
before chardet gets a chance to guess a legacy code page for short inputs.
"""

from __future__ import annotations

import codecs
import logging
from typing import Iterator

import chardet

from versiondiff.constants import (
    DEFAULT_CHARDET_CONFIDENCE,
    DEFAULT_CHARDET_SAMPLE_SIZE,
    DEFAULT_FALLBACK_ENCODINGS,
)

logger = logging.getLogger(__name__)

# Longest marks first: the utf-32-le BOM starts with the utf-16-le one
_BOMS = (
    (codecs.BOM_UTF32_LE, "utf-32"),
    (codecs.BOM_UTF32_BE, "utf-32"),
    (codecs.BOM_UTF8, "utf-8-sig"),
    (codecs.BOM_UTF16_LE, "utf-16"),
    (codecs.BOM_UTF16_BE, "utf-16"),
)


def encoding_from_bom(data: bytes) -> str | None:
    """Return the codec named by a leading byte-order mark, if there is one.

    >>> encoding_from_bom(codecs.BOM_UTF8 + b"text")
    'utf-8-sig'
    >>> encoding_from_bom(b"text") is None
    True

    """
    for bom, encoding in _BOMS:
        if data.startswith(bom):
            return encoding
    return None


def detect_encoding(
    data: bytes,
    sample_size: int = DEFAULT_CHARDET_SAMPLE_SIZE,
    confidence_threshold: float = DEFAULT_CHARDET_CONFIDENCE,
) -> str | None:
    """Guess the encoding of ``data`` with chardet.

    Parameters
    ----------
    data : bytes
        Raw file content
    sample_size : int, default 8192
        Only the first ``sample_size`` bytes are inspected
    confidence_threshold : float, default 0.7
        Guesses below this confidence are discarded

    Returns
    -------
    str | None
        The encoding name, or None when chardet has no confident answer

    """
    result = chardet.detect(data[:sample_size])
    encoding = result.get("encoding") if result else None
    if not encoding:
        logger.debug("chardet found no encoding")
        return None

    confidence = result.get("confidence") or 0.0
    if confidence < confidence_threshold:
        logger.debug("Ignoring chardet guess %s (confidence %.2f < %s)", encoding, confidence, confidence_threshold)
        return None

    logger.debug("chardet guessed %s (confidence %.2f)", encoding, confidence)
    return encoding


def _try_decode(data: bytes, encoding: str) -> str | None:
    try:
        return data.decode(encoding)
    except (UnicodeDecodeError, LookupError) as e:
        logger.debug("Could not decode as %s: %s", encoding, e)
        return None


def _strip_bom(text: str) -> str:
    # One mark only; further U+FEFF characters are content
    return text[1:] if text.startswith("\ufeff") else text


def _candidate_encodings(data: bytes, fallback_encodings: list[str], use_chardet: bool) -> Iterator[str]:
    bom_encoding = encoding_from_bom(data)
    if bom_encoding:
        yield bom_encoding
    yield "utf-8"
    # Reached only when the strict decodes above failed
    if use_chardet and data:
        detected = detect_encoding(data)
        if detected:
            yield detected
    yield from fallback_encodings


def read_text_with_encoding_detection(
    data: bytes,
    fallback_encodings: list[str] | None = None,
    use_chardet: bool = True,
) -> str:
    """Decode raw file content as text.

    Attempts, in order:
    1. the codec named by a byte-order mark
    2. strict utf-8
    3. chardet's guess (if enabled)
    4. each of ``fallback_encodings``
    5. utf-8 with replacement characters, logged as a warning

    Parameters
    ----------
    data : bytes
        Raw file content
    fallback_encodings : list[str] | None, default None
        Encodings to try after detection. If None, uses
        ``['utf-8', 'utf-8-sig', 'latin-1']``
    use_chardet : bool, default True
        Whether to ask chardet before the fallbacks

    Returns
    -------
    str
        Decoded text with one leading byte-order mark, if any, removed

    Examples
    --------
    >>> read_text_with_encoding_detection(codecs.BOM_UTF8 + b"Hello, world!")
    'Hello, world!'

    """
    if fallback_encodings is None:
        fallback_encodings = list(DEFAULT_FALLBACK_ENCODINGS)

    bom_encoding = encoding_from_bom(data)
    for encoding in _candidate_encodings(data, fallback_encodings, use_chardet):
        text = _try_decode(data, encoding)
        if text is None:
            continue
        logger.debug("Decoded %d bytes as %s", len(data), encoding)
        # The BOM codecs consume their own mark
        return text if encoding == bom_encoding else _strip_bom(text)

    logger.warning("All encoding attempts failed, using utf-8 with error replacement")
    return _strip_bom(data.decode("utf-8", errors="replace"))
