"""Fetcher reading documents from an already extracted export directory."""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from models import RawDocument
from .base_fetcher import BaseFetcher, SourceNotFoundError


class DirectoryFetcher(BaseFetcher):
    """Reads page documents from a directory tree, keyed by relative POSIX path."""

    def __init__(self, config: Dict[str, Any], logger: Optional[logging.Logger] = None):
        super().__init__(config, logger)
        export_directory = config.get('source', {}).get('export_directory')
        self.export_directory = Path(export_directory) if export_directory else None

    def fetch_documents(self) -> Dict[str, RawDocument]:
        """Scan the export directory for page documents."""
        if self.export_directory is None:
            raise SourceNotFoundError("No export directory configured (source.export_directory)")

        if not self.export_directory.is_dir():
            raise SourceNotFoundError(f"Export directory does not exist: {self.export_directory}")

        self.logger.info(f"Scanning export directory {self.export_directory}")

        documents = {}
        for path in sorted(self.export_directory.rglob(f'*{self.page_suffix}')):
            if not path.is_file():
                continue
            key = path.relative_to(self.export_directory).as_posix()
            documents[key] = RawDocument(key=key, loader=self._make_loader(path))

        self.logger.info(f"Found {len(documents)} page documents")
        return documents

    @staticmethod
    def _make_loader(path: Path):
        def load() -> str:
            return path.read_text(encoding='utf-8')
        return load
