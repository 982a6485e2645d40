"""
Publish report generator for aggregating statistics and formatting reports.

This module builds the run report from per-page statuses and formats it for
console display and JSON export.
"""

import json
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from logger import format_elapsed
from models import PublishStatus


class PublishReport:
    """Generates run reports from page statuses."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize publish report generator.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger('garden_publisher.orchestrator.publish_report')

    def generate_report(
        self,
        statuses: List[PublishStatus],
        documents_total: int,
        documents_selected: int,
        index: str,
        duration: float,
        output_directory: str,
        dry_run: bool = False,
        export_stats: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """
        Generate the run report.

        Args:
            statuses: Outcome of every selected page
            documents_total: Number of page documents in the export
            documents_selected: Number of documents passing the filters
            index: Resolved index title
            duration: Run duration in seconds
            output_directory: Where pages were written
            dry_run: Whether writing was skipped
            export_stats: Write statistics from the site exporter

        Returns:
            Report dictionary
        """
        export_stats = export_stats or {}
        failed = [s for s in statuses if s.status == 'failed']
        written = [s for s in statuses if s.status == 'written']

        report = {
            'summary': {
                'documents': documents_total,
                'selected': documents_selected,
                'written': len(written),
                'failed': len(failed),
                'index': index,
                'output_directory': output_directory,
                'dry_run': dry_run,
                'duration_seconds': duration,
                'duration_formatted': format_elapsed(duration),
                'total_errors': len(failed),
                'bytes_written': export_stats.get('bytes_written', 0),
                'pages_skipped': export_stats.get('pages_skipped', 0)
            },
            'pages': [status.to_dict() for status in sorted(statuses, key=lambda s: s.name)],
            'errors': [
                {'page': s.name, 'error': s.error_message}
                for s in sorted(failed, key=lambda s: s.name)
            ],
            'files': list(export_stats.get('files', [])),
            'timestamp': datetime.now().isoformat()
        }

        self.logger.info(
            f"Report generated: {len(written)} pages written, {len(failed)} errors"
        )
        return report

    def format_console_report(self, report: Dict[str, Any]) -> str:
        """
        Format report for console display.

        Args:
            report: Report dictionary

        Returns:
            Formatted console string
        """
        summary = report.get('summary', {})
        sections = [
            "=" * 60,
            "PUBLISH REPORT",
            "=" * 60,
            "",
            "Summary:",
            f"  Documents:   {summary.get('documents', 0)}",
            f"  Selected:    {summary.get('selected', 0)}",
            f"  Written:     {summary.get('written', 0)}",
            f"  Bytes:       {summary.get('bytes_written', 0)}",
            f"  Failed:      {summary.get('failed', 0)}",
            f"  Index:       {summary.get('index', '')}",
            f"  Output:      {summary.get('output_directory', '')}",
            f"  Duration:    {summary.get('duration_formatted', '0s')}",
        ]

        if summary.get('dry_run'):
            sections.append("  Mode:        DRY RUN (nothing written)")

        errors = report.get('errors', [])
        if errors:
            sections.append("")
            sections.append("Errors:")
            sections.append("-" * 60)
            for error in errors[:20]:
                sections.append(f"  {error['page']}: {error['error']}")
            if len(errors) > 20:
                sections.append(f"  ... and {len(errors) - 20} more")

        sections.append("=" * 60)
        return "\n".join(sections)

    def export_json_report(self, report: Dict[str, Any], filepath: str) -> None:
        """
        Export report to JSON file.

        Args:
            report: Report dictionary
            filepath: Output file path
        """
        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(report, f, indent=2, ensure_ascii=False, default=str)

        self.logger.info(f"JSON report exported to {filepath}")
