"""File validator — size, MIME type, and extension checks for uploads.

Checks run in that order and the first failure is returned; a file is never
reported with more than one problem at a time.
"""

from collections.abc import Mapping
from typing import Optional, Union

import structlog

from formguard.validators.models import FileValidationOptions, FileValidationResult, UploadedFile

logger = structlog.get_logger()

_KB = 1024
_MB = 1024 * 1024


def format_size(size: int) -> str:
    """Human-readable byte count: whole MB, then KB, then bytes."""
    if size >= _MB:
        return f"{int(size / _MB + 0.5)}MB"
    if size >= _KB:
        return f"{int(size / _KB + 0.5)}KB"
    return f"{size} bytes"


def file_extension(filename: str) -> Optional[str]:
    """Lower-cased text after the last dot, or None when the name has no dot."""
    _, dot, extension = filename.rpartition(".")
    if not dot or not extension:
        return None
    return extension.lower()


def validate_file(
    file: Union[UploadedFile, Mapping],
    options: Union[FileValidationOptions, Mapping, None] = None,
) -> FileValidationResult:
    """Validate an uploaded file against size/type/extension constraints.

    Args:
        file: UploadedFile, or a mapping with ``name``, ``size`` and ``type``
        options: FileValidationOptions or an equivalent mapping; defaults apply
            when omitted (5MB limit, no type or extension restriction)

    Returns:
        FileValidationResult with ``valid`` and, on rejection, one ``error``
    """
    if isinstance(file, Mapping):
        file = UploadedFile.model_validate(file)
    if options is None:
        options = FileValidationOptions()
    elif isinstance(options, Mapping):
        options = FileValidationOptions.model_validate(options)

    # 1. Size
    if file.size > options.max_size:
        return _reject(file, f"File size must be less than {format_size(options.max_size)}")

    # 2. MIME type
    if options.allowed_types and file.content_type not in options.allowed_types:
        return _reject(file, f"File type must be one of: {', '.join(options.allowed_types)}")

    # 3. Extension
    if options.allowed_extensions:
        allowed = {ext.lstrip(".").lower() for ext in options.allowed_extensions}
        extension = file_extension(file.name)
        if extension is None or extension not in allowed:
            return _reject(
                file,
                f"File extension must be one of: {', '.join(options.allowed_extensions)}",
            )

    return FileValidationResult(valid=True)


def _reject(file: UploadedFile, error: str) -> FileValidationResult:
    logger.debug("file_rejected", filename=file.name, size=file.size, reason=error)
    return FileValidationResult(valid=False, error=error)
