# =============================================================================
# core/services/import_service.py - File Import Pipeline
# =============================================================================
# Validates an uploaded file, runs the matching format adapter and returns
# the produced SheetFile record. It does NOT store anything; callers hand
# the record to a SheetStore explicitly.
# =============================================================================

import logging
from typing import BinaryIO

from app.config import settings
from app.exceptions import FileTooLargeError, UnsupportedFormatError
from core.models import TITLE_MAX_LENGTH, SheetFile
from lib.readers import file_extension, get_adapter, load_grid, supported_extensions

logger = logging.getLogger(__name__)


class ImportService:
    """
    Service for turning uploaded files into SheetFile records.

    Checks run before any parsing: extension first, then size.
    """

    @staticmethod
    def check_extension(filename: str) -> str:
        """
        Return the lower-cased extension (with dot) if an adapter handles it.

        Raises:
            UnsupportedFormatError: If the extension is unknown or not allowed
        """
        ext = file_extension(filename)
        if ext not in settings.allowed_extensions_list or get_adapter(ext) is None:
            raise UnsupportedFormatError(filename, supported_extensions())
        return ext

    @staticmethod
    def check_size(content: bytes) -> None:
        """
        Raises:
            FileTooLargeError: If content exceeds MAX_UPLOAD_SIZE_MB
        """
        if len(content) > settings.max_upload_size_bytes:
            raise FileTooLargeError(len(content) / (1024 * 1024), settings.MAX_UPLOAD_SIZE_MB)

    @staticmethod
    def sheet_title(filename: str, ext: str) -> str:
        """
        Title for the imported sheet: the filename, with the stem cut short
        when the whole name is longer than TITLE_MAX_LENGTH.

        Example:
            sheet_title("q" * 300 + ".csv", ".csv")  # "qqq...q.csv" (255 chars)
        """
        if len(filename) <= TITLE_MAX_LENGTH:
            return filename
        stem = filename[:len(filename) - len(ext)]
        return stem[:TITLE_MAX_LENGTH - len(ext)] + filename[len(stem):]

    @staticmethod
    def import_file(content: bytes | BinaryIO, filename: str) -> SheetFile:
        """
        Import a file into a new SheetFile.

        Args:
            content: Raw bytes or a binary file-like object
            filename: Original filename; becomes the sheet title (shortened
                to TITLE_MAX_LENGTH, extension kept)

        Returns:
            The produced (unsaved) SheetFile

        Raises:
            UnsupportedFormatError: Unknown extension
            FileTooLargeError: Content over the size limit
            FileReadError: Content could not be decoded or parsed
        """
        ext = ImportService.check_extension(filename)

        if hasattr(content, "read"):
            content = content.read()
        ImportService.check_size(content)

        logger.info(f"Importing {filename} ({len(content) / (1024 * 1024):.2f}MB)")

        grid = load_grid(content, filename)
        sheet = SheetFile(
            title=ImportService.sheet_title(filename, ext),
            file_extension=ext,
            data=grid,
        )

        logger.info(f"Imported {filename} as sheet {sheet.id}: {sheet.row_count} data rows")
        return sheet
