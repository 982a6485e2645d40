"""Fetcher reading documents from an exported zip archive."""

import io
import logging
import zipfile
from pathlib import Path
from typing import Any, Dict, Optional

from models import RawDocument
from .base_fetcher import BaseFetcher, FetcherError, SourceNotFoundError


class ArchiveFetcher(BaseFetcher):
    """
    Reads page documents from an "Export All" markdown archive.

    ``source.archive_path`` is either the zip file itself or a downloads
    directory, in which case the most recently modified zip is used.
    """

    def __init__(self, config: Dict[str, Any], logger: Optional[logging.Logger] = None):
        super().__init__(config, logger)
        archive_path = config.get('source', {}).get('archive_path')
        self.archive_path = Path(archive_path) if archive_path else None

    def locate_archive(self) -> Path:
        """
        Resolve the archive to read.

        Raises:
            SourceNotFoundError: If no archive exists at the configured location
        """
        if self.archive_path is None:
            raise SourceNotFoundError("No archive path configured (source.archive_path)")

        if self.archive_path.is_dir():
            candidates = sorted(
                self.archive_path.glob('*.zip'),
                key=lambda p: p.stat().st_mtime,
                reverse=True
            )
            if not candidates:
                raise SourceNotFoundError(f"No .zip archive found in {self.archive_path}")
            self.logger.info(f"Using newest archive in {self.archive_path}: {candidates[0].name}")
            return candidates[0]

        if not self.archive_path.exists():
            raise SourceNotFoundError(f"Archive not found: {self.archive_path}")

        return self.archive_path

    def fetch_documents(self) -> Dict[str, RawDocument]:
        """Open the archive and expose every page as a lazily read document."""
        archive = self.locate_archive()
        self.logger.info(f"Reading export archive {archive}")

        try:
            data = archive.read_bytes()
            bundle = zipfile.ZipFile(io.BytesIO(data))
        except (OSError, zipfile.BadZipFile) as e:
            raise FetcherError(f"Failed to open archive {archive}: {e}") from e

        documents = {}
        for info in bundle.infolist():
            if info.is_dir() or not self.is_page_key(info.filename):
                continue
            documents[info.filename] = RawDocument(
                key=info.filename,
                loader=self._make_loader(bundle, info.filename)
            )

        self.logger.info(f"Found {len(documents)} page documents in {archive.name}")
        return documents

    @staticmethod
    def _make_loader(bundle: zipfile.ZipFile, name: str):
        def load() -> str:
            return bundle.read(name).decode('utf-8')
        return load
