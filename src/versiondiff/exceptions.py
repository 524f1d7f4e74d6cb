#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the versiondiff library.

The diff engine itself is total over any two finite line sequences and never
raises. Everything defined here belongs to the layers around it: argument
validation, text acquisition, output writing and optional dependencies.
Acquisition errors are always raised before a comparison starts, so an edit
script never carries a failure.

Exception Hierarchy
-------------------
- VersionDiffError (base exception)

  - ValidationError (parameter/option validation)

  - FileError (file access and I/O)
    - FileNotFoundError (file doesn't exist)
    - FileAccessError (permissions, locked files)
    - MalformedFileError (unreadable or corrupted content)

  - RenderingError (output generation failures)
    - OutputWriteError (file write failures)

  - DependencyError (missing/incompatible packages)

"""

from typing import Any


class VersionDiffError(Exception):
    """Base class for every error raised around a comparison.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(VersionDiffError):
    """Raised for unusable options, such as more labels than versions or ``max_workers < 1``.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class FileError(VersionDiffError):
    """Raised when a base or version text cannot be acquired.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class FileNotFoundError(FileError):
    """The base or a version names a path that does not exist."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        if message is None:
            message = f"File not found: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class FileAccessError(FileError):
    """The path exists but cannot be opened, usually for lack of permission."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        if message is None:
            message = f"Cannot access file: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class MalformedFileError(FileError):
    """Text cannot be extracted, e.g. a corrupt or password-protected PDF."""


class RenderingError(VersionDiffError):
    """Raised when a unified, JSON or HTML diff cannot be produced.

    Parameters
    ----------
    message : str
        Description of the rendering error
    rendering_stage : str, optional
        Renderer or stage that failed (e.g. "html", "json")
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error=original_error)
        self.rendering_stage = rendering_stage


class OutputWriteError(RenderingError):
    """The rendered diff could not be written to the ``--output`` path."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        if message is None:
            message = f"Failed to write output file: {file_path}"
        super().__init__(message, rendering_stage="write", original_error=original_error)
        self.file_path = file_path


class DependencyError(VersionDiffError):
    """Exception raised when an optional dependency is not available.

    Parameters
    ----------
    feature_name : str
        Name of the feature requiring dependencies (e.g. "pdf")
    missing_packages : list[tuple[str, str]]
        List of (package_name, version_spec) tuples for missing packages
    version_mismatches : list[tuple[str, str, str]], optional
        List of (package_name, required_version, installed_version) tuples
    install_command : str, optional
        Suggested pip install command to resolve the issue
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        feature_name: str,
        missing_packages: list[tuple[str, str]],
        version_mismatches: list[tuple[str, str, str]] | None = None,
        install_command: str = "",
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Initialize the dependency error with package details."""
        version_mismatches = version_mismatches or []
        self.original_import_error = original_import_error
        if message is None:
            message_parts = []

            if missing_packages:
                pkg_list = ", ".join(f"'{name}{spec}'" if spec else f"'{name}'" for name, spec in missing_packages)
                message_parts.append(f"{feature_name.upper()} input requires the following packages: {pkg_list}")

            if version_mismatches:
                mismatch_str = ", ".join(
                    f"'{name}' (requires {required}, but {installed} is installed)"
                    for name, required, installed in version_mismatches
                )
                message_parts.append(f"{feature_name.upper()} input has version mismatches: {mismatch_str}")

            message = "\n".join(message_parts)

            if install_command:
                message += f"\nInstall with: {install_command}"
            else:
                all_packages = missing_packages + [(name, req) for name, req, _ in version_mismatches]
                if all_packages:
                    packages_str = " ".join(f'"{name}{spec}"' if spec else name for name, spec in all_packages)
                    message += f"\nInstall with: pip install --upgrade {packages_str}"

        super().__init__(message, original_error=original_import_error)
        self.feature_name = feature_name
        self.missing_packages = missing_packages
        self.version_mismatches = version_mismatches
        self.install_command = install_command


__all__ = [
    "VersionDiffError",
    "ValidationError",
    "FileError",
    "FileNotFoundError",
    "FileAccessError",
    "MalformedFileError",
    "RenderingError",
    "OutputWriteError",
    "DependencyError",
]
