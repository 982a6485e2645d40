"""Selects the documents to publish and builds the page catalogue."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Iterable, List, Optional, Tuple

from converters.filename_mapper import to_page_name
from models import PageCatalogue, PublicationConfig, RawDocument


class PageSelector:
    """
    Applies the publication filters to the exported documents.

    The title filter runs first, on the page name. Bodies are read only for
    documents that pass it, and the content filter decides the rest.
    """

    def __init__(
        self,
        page_suffix: str = '.md',
        max_workers: int = 1,
        logger: Optional[logging.Logger] = None
    ):
        self.page_suffix = page_suffix
        self.max_workers = max_workers
        self.logger = logger or logging.getLogger('garden_publisher.orchestrator.page_selector')

    def select(
        self,
        documents: Iterable[RawDocument],
        config: PublicationConfig
    ) -> Dict[str, str]:
        """
        Select documents passing both filters.

        Args:
            documents: Candidate documents
            config: Resolved publication configuration

        Returns:
            Mapping of document key to body for every selected document
        """
        candidates = [
            document for document in documents
            if config.title_filter(to_page_name(document.key, self.page_suffix))
        ]
        self.logger.info(f"{len(candidates)} documents passed the title filter")

        if self.max_workers > 1 and len(candidates) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                results = list(executor.map(
                    lambda document: self._check_content(document, config), candidates
                ))
        else:
            results = [self._check_content(document, config) for document in candidates]

        selected = {key: body for key, body in results if body is not None}
        self.logger.info(f"{len(selected)} documents passed the content filter")
        return selected

    def build_catalogue(self, selected: Dict[str, str]) -> PageCatalogue:
        """Names of every selected page, in key order."""
        return tuple(to_page_name(key, self.page_suffix) for key in sorted(selected))

    def _check_content(
        self,
        document: RawDocument,
        config: PublicationConfig
    ) -> Tuple[str, Optional[str]]:
        body = document.read()
        if config.content_filter(body):
            return document.key, body
        return document.key, None


def sample_names(catalogue: PageCatalogue, count: int = 5) -> List[str]:
    """First few catalogue names, for log output."""
    return list(catalogue[:count])
