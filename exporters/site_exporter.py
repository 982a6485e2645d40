"""Site exporter writing generated pages to the output directory."""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from models import GeneratedPage


class SiteExporter:
    """
    Writes generated HTML pages to disk.

    This exporter:
    1. Creates the output directory on first use
    2. Writes one file per page using the page's mapped file name
    3. Skips writing in dry-run mode while still counting pages
    4. Tracks written files for reporting
    """

    def __init__(
        self,
        config: Dict[str, Any],
        logger: Optional[logging.Logger] = None,
        output_dir: Optional[str] = None
    ):
        """
        Initialize the site exporter.

        Args:
            config: Configuration dictionary with publish settings
            logger: Logger instance
            output_dir: Optional output directory override (takes precedence over config)
        """
        self.config = config
        self.logger = logger or logging.getLogger('garden_publisher.exporters.site_exporter')

        publish_config = config.get('publish', {})
        self.output_directory = Path(output_dir or publish_config.get('output_directory', './out'))
        self.dry_run = publish_config.get('dry_run', False)

        self.stats = {
            'pages_written': 0,
            'pages_skipped': 0,
            'bytes_written': 0,
        }
        self.exported_files: List[Path] = []

    def prepare(self) -> None:
        """Create the output directory."""
        if self.dry_run:
            self.logger.info(f"Dry-run: not creating {self.output_directory}")
            return
        self.output_directory.mkdir(parents=True, exist_ok=True)
        self.logger.debug(f"Output directory ready: {self.output_directory}")

    def write(self, page: GeneratedPage) -> Optional[Path]:
        """
        Write one page.

        Args:
            page: Generated page

        Returns:
            Path written, or None in dry-run mode

        Raises:
            OSError: If the file cannot be written
        """
        target = self.output_directory / page.html_file_name

        if self.dry_run:
            self.logger.info(f"Dry-run: would write '{page.name}' to {target}")
            self.stats['pages_skipped'] += 1
            return None

        data = page.html_document.encode('utf-8')
        target.write_bytes(data)

        self.stats['pages_written'] += 1
        self.stats['bytes_written'] += len(data)
        self.exported_files.append(target)
        self.logger.debug(f"Wrote '{page.name}' to {target}")
        return target

    def get_stats(self) -> Dict[str, Any]:
        """Get write statistics and the files written so far."""
        return {
            **self.stats,
            'files': [str(path) for path in self.exported_files]
        }
