"""
Publish orchestrator coordinating a complete site build.

This module sequences the run: Fetch → Configure → Select → Render → Write →
Report. The catalogue of published names is complete before any page is
rendered, since every page links against the full catalogue.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any, Dict, List, Optional, Tuple

from tqdm import tqdm

from converters import HtmlTemplater, LinkRewriter, MarkdownRenderer, build_page
from converters.filename_mapper import to_page_name
from exporters import SiteExporter
from fetchers import BaseFetcher, FetcherFactory
from logger import ProgressTracker, log_section
from models import DEFAULT_INDEX_TITLE, GeneratedPage, PageCatalogue, PublishStatus
from outline import ConfigResolver
from .page_selector import PageSelector, sample_names
from .publish_report import PublishReport


class PageProcessingError(Exception):
    """Raised when one page cannot be rewritten, rendered or templated."""

    def __init__(self, name: str, cause: Exception):
        self.name = name
        self.cause = cause
        super().__init__(f"Failed to process page '{name}': {cause}")


class PublishOrchestrator:
    """Central coordinator sequencing all publish phases."""

    def __init__(
        self,
        config: Dict[str, Any],
        logger: Optional[logging.Logger] = None,
        fetcher: Optional[BaseFetcher] = None,
        exporter: Optional[SiteExporter] = None,
        renderer: Optional[MarkdownRenderer] = None
    ):
        """
        Initialize publish orchestrator.

        Args:
            config: Configuration dictionary
            logger: Optional logger instance
            fetcher: Optional document source (built from config if omitted)
            exporter: Optional output sink (built from config if omitted)
            renderer: Optional markdown renderer (built from config if omitted)
        """
        self.config = config
        self.logger = logger or logging.getLogger('garden_publisher.orchestrator')

        source_config = config.get('source', {})
        publish_config = config.get('publish', {})

        self.config_page = source_config.get('config_page', 'roam/js/public-garden.md')
        self.page_suffix = source_config.get('page_suffix', '.md')
        self.max_workers = publish_config.get('max_workers', 4)

        self.fetcher = fetcher or FetcherFactory.create_fetcher(config, self.logger)
        self.exporter = exporter or SiteExporter(config, logger=self.logger)
        self.renderer = renderer or MarkdownRenderer.from_config(config, logger=self.logger)
        self.resolver = ConfigResolver(
            default_index=publish_config.get('default_index', DEFAULT_INDEX_TITLE),
            logger=self.logger
        )
        self.selector = PageSelector(
            page_suffix=self.page_suffix,
            max_workers=self.max_workers,
            logger=self.logger
        )
        self.rewriter = LinkRewriter(logger=self.logger)
        self.templater = HtmlTemplater(logger=self.logger)
        self.report_generator = PublishReport(self.logger)

    def publish(self) -> Dict[str, Any]:
        """
        Run the complete publish pipeline.

        Returns:
            Report dictionary

        Raises:
            FetcherError: If the export cannot be read
            MalformedOutlineError: If the configuration page is malformed
        """
        start_time = time.time()

        log_section("Fetch")
        documents = self.fetcher.fetch_documents()

        log_section("Configure")
        config_document = documents.get(self.config_page)
        publication = self.resolver.resolve(config_document)

        log_section("Select")
        selected = self.selector.select(documents.values(), publication)
        catalogue = self.selector.build_catalogue(selected)
        self.logger.info(f"Resolving {len(catalogue)} pages")
        self.logger.info(f"Here are some: {', '.join(sample_names(catalogue))}")

        log_section("Render")
        pages, statuses = self._render_pages(selected, catalogue, publication.index)

        log_section("Write")
        statuses.extend(self._write_pages(pages))

        duration = time.time() - start_time
        return self.report_generator.generate_report(
            statuses=statuses,
            documents_total=len(documents),
            documents_selected=len(selected),
            index=publication.index,
            duration=duration,
            output_directory=str(self.exporter.output_directory),
            dry_run=self.exporter.dry_run,
            export_stats=self.exporter.get_stats()
        )

    def _render_pages(
        self,
        selected: Dict[str, str],
        catalogue: PageCatalogue,
        index: str
    ) -> Tuple[List[GeneratedPage], List[PublishStatus]]:
        """Render every selected page, isolating failures per page."""
        pages: List[GeneratedPage] = []
        failures: List[PublishStatus] = []

        with ProgressTracker(total_items=len(selected), item_type='pages') as tracker, \
                tqdm(total=len(selected), desc="Rendering pages", unit="page", disable=None) as progress:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                futures = {
                    executor.submit(self._render_page, key, body, catalogue, index): key
                    for key, body in selected.items()
                }
                for future in as_completed(futures):
                    try:
                        pages.append(future.result())
                        tracker.increment(success=True)
                    except PageProcessingError as e:
                        self.logger.error(str(e))
                        failures.append(PublishStatus(
                            name=e.name,
                            status='failed',
                            error_message=str(e.cause)
                        ))
                        tracker.increment(success=False)
                    progress.update(1)

        return pages, failures

    def _render_page(self, key: str, body: str, catalogue: PageCatalogue, index: str) -> GeneratedPage:
        name = to_page_name(key, self.page_suffix)
        try:
            return build_page(
                name=name,
                body=body,
                catalogue=catalogue,
                index=index,
                rewriter=self.rewriter,
                renderer=self.renderer,
                templater=self.templater
            )
        except Exception as e:
            raise PageProcessingError(name, e) from e

    def _write_pages(self, pages: List[GeneratedPage]) -> List[PublishStatus]:
        """Write rendered pages, recording a status per page."""
        statuses = []
        self.exporter.prepare()

        for page in sorted(pages, key=lambda p: p.name):
            try:
                self.exporter.write(page)
            except OSError as e:
                self.logger.error(f"Failed to write page '{page.name}': {e}")
                statuses.append(PublishStatus(
                    name=page.name,
                    status='failed',
                    html_file_name=page.html_file_name,
                    error_message=str(e)
                ))
                continue

            statuses.append(PublishStatus(
                name=page.name,
                status='rendered' if self.exporter.dry_run else 'written',
                html_file_name=page.html_file_name
            ))

        return statuses
