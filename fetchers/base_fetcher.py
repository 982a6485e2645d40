"""Abstract base fetcher interface and common functionality."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from models import RawDocument


class FetcherError(Exception):
    """Base exception for fetcher-related errors."""
    pass


class SourceNotFoundError(FetcherError):
    """Exception for a missing export archive or directory."""
    pass


class BaseFetcher(ABC):
    """Abstract base class for exported document sources."""

    def __init__(self, config: Dict[str, Any], logger: Optional[logging.Logger] = None):
        """
        Initialize base fetcher with configuration and logger.

        Args:
            config: Configuration dictionary
            logger: Logger instance (optional, uses module logger if not provided)
        """
        self.config = config
        self.logger = logger or logging.getLogger('garden_publisher.fetcher')

        source_config = config.get('source', {})
        self.page_suffix = source_config.get('page_suffix', '.md')

    @abstractmethod
    def fetch_documents(self) -> Dict[str, RawDocument]:
        """
        Fetch every page document of the export.

        Returns:
            Mapping of document key (POSIX path with suffix) to RawDocument

        Raises:
            FetcherError: If the export cannot be read
        """
        pass

    def is_page_key(self, key: str) -> bool:
        """Check whether an entry of the export is a page document."""
        return bool(key) and not key.endswith('/') and key.endswith(self.page_suffix)
