"""Fetchers package for reading exported outline documents."""

from .base_fetcher import BaseFetcher, FetcherError, SourceNotFoundError
from .archive_fetcher import ArchiveFetcher
from .directory_fetcher import DirectoryFetcher

class FetcherFactory:
    """Factory for creating fetcher instances based on configuration."""

    @staticmethod
    def create_fetcher(config: dict, logger=None):
        """Create appropriate fetcher based on config mode.

        Args:
            config: Configuration dictionary
            logger: Logger instance

        Returns:
            BaseFetcher instance (ArchiveFetcher or DirectoryFetcher)

        Raises:
            ValueError: If mode is invalid
        """
        mode = config.get('source', {}).get('mode', 'archive')

        if mode == 'archive':
            return ArchiveFetcher(config, logger)
        elif mode == 'directory':
            return DirectoryFetcher(config, logger)
        else:
            raise ValueError(f"Invalid source mode: {mode}. Must be 'archive' or 'directory'.")

__all__ = [
    'BaseFetcher',
    'FetcherError',
    'SourceNotFoundError',
    'ArchiveFetcher',
    'DirectoryFetcher',
    'FetcherFactory'
]
