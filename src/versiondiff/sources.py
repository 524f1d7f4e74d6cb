#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/versiondiff/sources.py
"""Acquisition of base and version texts from files and streams.

Plain text files (``.txt``, ``.md`` and anything else that is not a PDF)
are decoded with encoding detection. PDFs go through PyMuPDF text
extraction, one page after another. Every failure here is raised as a
:class:`~versiondiff.exceptions.FileError` or
:class:`~versiondiff.exceptions.DependencyError` before any comparison
starts.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Iterable, Sequence, Union

from versiondiff.constants import DEPS_PDF, PDF_EXTENSIONS, PDF_MAGIC, STDIN_LABEL, TEXT_EXTENSIONS
from versiondiff.diff.text_diff import Version
from versiondiff.exceptions import FileAccessError, FileNotFoundError, MalformedFileError, ValidationError
from versiondiff.utils.decorators import requires_dependencies
from versiondiff.utils.encoding import read_text_with_encoding_detection

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def is_pdf(data: bytes, path: Path | None = None) -> bool:
    """Return True if ``data`` should go through PDF text extraction.

    A known text extension (``.txt``, ``.md``, ...) always means text and a
    ``.pdf`` extension always means PDF. Otherwise the magic bytes decide.
    """
    suffix = path.suffix.lower() if path is not None else ""
    if suffix in TEXT_EXTENSIONS:
        return False
    if suffix in PDF_EXTENSIONS:
        return True
    return data.lstrip()[: len(PDF_MAGIC)] == PDF_MAGIC


@requires_dependencies("pdf", DEPS_PDF)
def extract_pdf_text(data: bytes, file_path: str | None = None) -> str:
    """Extract the plain text of every page of a PDF.

    Parameters
    ----------
    data : bytes
        Raw PDF content
    file_path : str, optional
        Source path, used in error messages

    Returns
    -------
    str
        Page texts joined with newlines

    Raises
    ------
    MalformedFileError
        If the PDF cannot be opened or is password protected
    DependencyError
        If PyMuPDF is not installed

    """
    import fitz

    try:
        doc = fitz.open(stream=data, filetype="pdf")
    except Exception as e:
        raise MalformedFileError(
            f"Failed to open PDF document: {e!r}", file_path=file_path, original_error=e
        ) from e

    with doc:
        if doc.needs_pass:
            raise MalformedFileError("PDF document is password-protected", file_path=file_path)
        pages = [page.get_text("text") for page in doc]

    logger.debug("Extracted text from %d PDF page(s)", len(pages))
    return "\n".join(page.rstrip("\n") for page in pages)


def decode_bytes(data: bytes, path: Path | None = None) -> str:
    """Turn raw file content into text, extracting PDFs when needed.

    Content sniffed as PDF only by its magic bytes is decoded as text when
    PyMuPDF cannot open it. A ``.pdf`` file that fails to open is an error.
    """
    if not is_pdf(data, path):
        return read_text_with_encoding_detection(data)

    file_path = str(path) if path else None
    try:
        return extract_pdf_text(data, file_path=file_path)
    except MalformedFileError as e:
        if path is not None and path.suffix.lower() in PDF_EXTENSIONS:
            raise
        logger.warning("%s starts like a PDF but is not one (%s); reading it as text", file_path or STDIN_LABEL, e)
        return read_text_with_encoding_detection(data)


def read_text(path: PathLike) -> str:
    """Read a base or version file as text.

    Raises
    ------
    FileNotFoundError
        If the path does not exist
    FileAccessError
        If the path is a directory or cannot be read
    MalformedFileError
        If text cannot be extracted from a PDF

    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(str(file_path))
    if not file_path.is_file():
        raise FileAccessError(str(file_path), message=f"Not a regular file: {file_path}")

    try:
        data = file_path.read_bytes()
    except OSError as e:
        raise FileAccessError(str(file_path), original_error=e) from e

    logger.debug("Read %d bytes from %s", len(data), file_path)
    return decode_bytes(data, file_path)


def read_stream(stream: IO[bytes]) -> str:
    """Read a binary stream (such as stdin) as text.

    Raises
    ------
    MalformedFileError
        If the stream is empty

    """
    data = stream.read()
    if not data:
        raise MalformedFileError(f"No data received from {STDIN_LABEL}")
    return decode_bytes(data)


def load_version(path: PathLike, label: str | None = None) -> Version:
    """Load a file as a :class:`Version` labelled with its file name."""
    file_path = Path(path)
    text = read_text(file_path)
    return Version.create(label or file_path.name, text, source=str(file_path))


def load_versions(paths: Sequence[PathLike], labels: Iterable[str] | None = None) -> list[Version]:
    """Load several version files, keeping their order.

    Every file is read before any is returned, so a bad path fails the whole
    batch up front.

    Raises
    ------
    ValidationError
        If more labels than paths are supplied

    """
    label_list: list[str | None] = list(labels or [])
    if len(label_list) > len(paths):
        raise ValidationError(
            f"Got {len(label_list)} labels for {len(paths)} version file(s)",
            parameter_name="labels",
            parameter_value=label_list,
        )
    label_list.extend([None] * (len(paths) - len(label_list)))
    return [load_version(path, label) for path, label in zip(paths, label_list)]
