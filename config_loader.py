"""Configuration loader with YAML support and environment variable substitution."""

import copy
import os
import re
from typing import Any, Dict, Optional

import yaml

from models import DEFAULT_INDEX_TITLE

DEFAULT_CONFIG: Dict[str, Any] = {
    'source': {
        'mode': 'archive',
        'archive_path': './downloads',
        'export_directory': None,
        'config_page': 'roam/js/public-garden.md',
        'page_suffix': '.md',
    },
    'publish': {
        'output_directory': './out',
        'default_index': DEFAULT_INDEX_TITLE,
        'max_workers': 4,
        'dry_run': False,
        'report_path': None,
    },
    'render': {
        'markdown_extensions': ['extra', 'sane_lists'],
    },
    'logging': {
        'level': None,
        'file': None,
    },
}


class ConfigLoader:
    """Handles loading and validation of configuration files."""

    ENV_VAR_PATTERN = re.compile(r'\$\{([A-Za-z_][A-Za-z0-9_]*)\}')

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> Dict[str, Any]:
        """
        Load configuration from YAML file with environment variable substitution.

        Values from the file are merged over the built-in defaults. Without a
        path the defaults are returned.

        Args:
            config_path: Path to YAML configuration file

        Returns:
            Parsed configuration dictionary

        Raises:
            FileNotFoundError: If config file doesn't exist
            yaml.YAMLError: If YAML parsing fails
        """
        if config_path is None:
            return copy.deepcopy(DEFAULT_CONFIG)

        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f)

        if config_data is None:
            config_data = {}

        if not isinstance(config_data, dict):
            raise ValueError("Configuration file must contain a dictionary")

        config_data = cls._substitute_env_vars_recursive(config_data)

        return deep_merge(DEFAULT_CONFIG, config_data)

    @classmethod
    def validate(cls, config: Dict[str, Any]) -> None:
        """
        Validate configuration for required fields and correct values.

        Args:
            config: Configuration dictionary to validate

        Raises:
            ValueError: If validation fails
        """
        mode = get_nested(config, 'source.mode', 'archive')
        if mode not in ['archive', 'directory']:
            raise ValueError("source.mode must be 'archive' or 'directory'")

        if mode == 'archive':
            cls._validate_required_field(config, 'source.archive_path')
        else:
            cls._validate_required_field(config, 'source.export_directory')
            export_dir = get_nested(config, 'source.export_directory')
            if not os.path.isdir(export_dir):
                raise ValueError(
                    f"source.export_directory '{export_dir}' is not a valid directory"
                )

        cls._validate_required_field(config, 'source.config_page')
        cls._validate_required_field(config, 'source.page_suffix')

        cls._validate_required_field(config, 'publish.output_directory')
        output_dir = get_nested(config, 'publish.output_directory')
        if os.path.exists(output_dir) and not os.path.isdir(output_dir):
            raise ValueError(f"publish.output_directory '{output_dir}' is not a directory")

        cls._validate_required_field(config, 'publish.default_index')

        max_workers = get_nested(config, 'publish.max_workers', 4)
        if not isinstance(max_workers, int) or isinstance(max_workers, bool) or max_workers < 1:
            raise ValueError("publish.max_workers must be a positive integer")

        dry_run = get_nested(config, 'publish.dry_run', False)
        if not isinstance(dry_run, bool):
            raise ValueError("publish.dry_run must be a boolean")

        extensions = get_nested(config, 'render.markdown_extensions', [])
        if not isinstance(extensions, list) or not all(isinstance(e, str) for e in extensions):
            raise ValueError("render.markdown_extensions must be a list of extension names")

    @classmethod
    def merge_with_args(cls, config: Dict[str, Any], args) -> Dict[str, Any]:
        """
        Merge configuration file with CLI arguments.
        CLI arguments take precedence over config file values.

        Args:
            config: Base configuration dictionary
            args: CLI arguments with attributes matching config keys

        Returns:
            Merged configuration dictionary
        """
        merged = copy.deepcopy(config)

        for section in ('source', 'publish', 'render', 'logging'):
            merged.setdefault(section, {})

        if getattr(args, 'archive', None):
            merged['source']['mode'] = 'archive'
            merged['source']['archive_path'] = args.archive

        if getattr(args, 'export_dir', None):
            merged['source']['mode'] = 'directory'
            merged['source']['export_directory'] = args.export_dir

        if getattr(args, 'config_page', None):
            merged['source']['config_page'] = args.config_page

        if getattr(args, 'output_dir', None):
            merged['publish']['output_directory'] = args.output_dir

        if getattr(args, 'index', None):
            merged['publish']['default_index'] = args.index

        if getattr(args, 'workers', None) is not None:
            merged['publish']['max_workers'] = args.workers

        if getattr(args, 'dry_run', None) is not None:
            merged['publish']['dry_run'] = args.dry_run

        if getattr(args, 'report', None):
            merged['publish']['report_path'] = args.report

        if getattr(args, 'log_file', None):
            merged['logging']['file'] = args.log_file

        return merged

    @classmethod
    def _substitute_env_vars_recursive(cls, data: Any) -> Any:
        """Recursively substitute environment variables in data structure."""
        if isinstance(data, dict):
            return {key: cls._substitute_env_vars_recursive(value) for key, value in data.items()}
        elif isinstance(data, list):
            return [cls._substitute_env_vars_recursive(item) for item in data]
        elif isinstance(data, str):
            return cls._substitute_env_vars(data)
        else:
            return data

    @classmethod
    def _substitute_env_vars(cls, value: str) -> str:
        """Substitute environment variables in a string value."""
        def replace_match(match):
            var_name = match.group(1)
            env_value = os.getenv(var_name)
            return env_value if env_value is not None else match.group(0)

        return cls.ENV_VAR_PATTERN.sub(replace_match, value)

    @staticmethod
    def _validate_required_field(config_section: dict, field: str) -> None:
        """Validate that a required field exists and has a value."""
        value = get_nested(config_section, field)
        if value is None or value == '':
            raise ValueError(f"Missing required configuration: {field}")

        # Check for unsubstituted environment variables
        if isinstance(value, str) and '${' in value:
            match = ConfigLoader.ENV_VAR_PATTERN.search(value)
            var_name = match.group(1) if match else value
            raise ValueError(
                f"Configuration field '{field}' contains unsubstituted environment variable: {value}. "
                f"Please set the {var_name} environment variable or provide a value in config file."
            )


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of base with override merged in, recursing into dictionaries."""
    merged = copy.deepcopy(base)
    for key, value in (override or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def get_nested(config: dict, path: str, default: Any = None) -> Any:
    """Safely retrieve nested configuration values using dot notation.

    Args:
        config: Configuration dictionary
        path: Dot-separated path (e.g., "publish.output_directory")
        default: Default value if path doesn't exist

    Returns:
        Value at the nested path or default
    """
    keys = path.split('.')
    value = config

    for key in keys:
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default

    return value


__all__ = ['ConfigLoader', 'DEFAULT_CONFIG', 'deep_merge', 'get_nested']
