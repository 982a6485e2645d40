"""Export package writing the published site to the filesystem.

Package Structure:
- site_exporter: Writes generated HTML pages into the output directory

Configuration Referenced:
- publish.output_directory: Base output path for written files
- publish.dry_run: Log instead of writing
"""

from .site_exporter import SiteExporter

__all__ = [
    'SiteExporter'
]
