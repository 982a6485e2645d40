#!/usr/bin/env python3
"""
Garden Publisher - Main CLI Entry Point

Builds a static HTML site from an outline-notes export. Pages to publish and
the home page are chosen by the reserved configuration page inside the
export (``roam/js/public-garden.md`` by default).
"""

import argparse
import logging
import sys
from pathlib import Path

import yaml

# Add project root to Python path for relative imports
current_dir = Path(__file__).parent
sys.path.insert(0, str(current_dir))

from config_loader import ConfigLoader, get_nested
from fetchers import FetcherError
from logger import setup_logging, log_section, log_config
from orchestrator import PublishOrchestrator, PublishReport
from outline import MalformedOutlineError

__version__ = "1.0.0"


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser for CLI."""
    parser = argparse.ArgumentParser(
        description="Publish an outline-notes export as a static HTML site",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Publish the newest export in ./downloads to ./out
  python publish.py

  # Publish a specific archive
  python publish.py --archive ./downloads/export.zip --output-dir ./site

  # Publish an extracted export directory
  python publish.py --export-dir ./export

  # Preview without writing files
  python publish.py --dry-run -v
        """
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    parser.add_argument(
        '--config',
        type=str,
        help='Path to configuration YAML file (defaults are used when omitted)'
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        '--archive',
        type=str,
        help='Export zip, or a directory whose newest zip is used'
    )
    source.add_argument(
        '--export-dir',
        type=str,
        help='Directory holding an extracted export'
    )

    parser.add_argument(
        '--config-page',
        type=str,
        help='Key of the configuration page inside the export'
    )

    parser.add_argument(
        '--output-dir',
        type=str,
        help='Directory the HTML pages are written to'
    )

    parser.add_argument(
        '--index',
        type=str,
        help='Index page title used when the configuration page sets none'
    )

    parser.add_argument(
        '--workers',
        type=int,
        help='Number of pages processed in parallel'
    )

    parser.add_argument(
        '--report',
        type=str,
        help='Write a JSON report to this path'
    )

    parser.add_argument(
        '--log-file',
        type=str,
        help='Also log to this file'
    )

    parser.add_argument(
        '--dry-run',
        action=argparse.BooleanOptionalAction,
        default=None,
        help='Build pages without writing them'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='count',
        default=0,
        help='Increase verbosity (-v for INFO, -vv for DEBUG)'
    )

    return parser


def run_publish(config: dict, logger: logging.Logger) -> int:
    """Execute the publish pipeline and report the outcome."""
    logger.info("Starting publish pipeline")

    try:
        orchestrator = PublishOrchestrator(config, logger=logger)
        report = orchestrator.publish()
    except MalformedOutlineError as e:
        logger.error(f"Configuration page is malformed: {e}")
        return 2
    except FetcherError as e:
        logger.error(f"Failed to read export: {e}")
        return 1
    except KeyboardInterrupt:
        logger.error("Publish interrupted by user")
        return 130

    report_generator = PublishReport(logger)
    print("\n" + report_generator.format_console_report(report))

    report_path = get_nested(config, 'publish.report_path')
    if report_path:
        try:
            report_generator.export_json_report(report, report_path)
        except OSError as e:
            logger.warning(f"Failed to export JSON report: {e}")

    errors = report['summary']['total_errors']
    if errors > 0:
        logger.warning(f"Publish completed with {errors} errors")
        return 1

    logger.info("Publish completed successfully")
    return 0


def main(argv=None) -> int:
    """Main entry point for the CLI."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    try:
        logger = setup_logging(verbosity=args.verbose)

        log_section("Garden Publisher")
        logger.info(f"Version: {__version__}")

        config_loader = ConfigLoader()
        if args.config:
            logger.info(f"Loading configuration from {args.config}")
        config = config_loader.load(args.config)

        # CLI takes precedence
        config = config_loader.merge_with_args(config, args)
        config_loader.validate(config)

        # Reconfigure logging with config file settings
        logger = setup_logging(
            verbosity=args.verbose,
            log_file=get_nested(config, 'logging.file'),
            level=None if args.verbose else get_nested(config, 'logging.level')
        )

        log_config(config)

        return run_publish(config, logger)

    except FileNotFoundError as e:
        print(f"ERROR: File not found: {e}", file=sys.stderr)
        return 2
    except (ValueError, yaml.YAMLError) as e:
        print(f"ERROR: Configuration error: {e}", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        print("\nPublish interrupted by user", file=sys.stderr)
        return 130
    except Exception as e:
        print(f"ERROR: Unexpected error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
