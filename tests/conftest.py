"""Shared fixtures for publisher tests."""

import copy
from pathlib import Path
from typing import Dict

import pytest

from config_loader import DEFAULT_CONFIG, deep_merge


def write_export(root: Path, pages: Dict[str, str]) -> Path:
    """Write pages (key -> body) below root, creating folders for namespaced keys."""
    for key, body in pages.items():
        path = root / key
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(body, encoding='utf-8')
    return root


@pytest.fixture
def export_dir(tmp_path):
    directory = tmp_path / 'export'
    directory.mkdir()
    return directory


@pytest.fixture
def write_pages(export_dir):
    """Write pages into the export directory."""
    def write(pages: Dict[str, str]) -> Path:
        return write_export(export_dir, pages)
    return write


@pytest.fixture
def output_dir(tmp_path):
    return tmp_path / 'out'


@pytest.fixture
def run_config(export_dir, output_dir):
    """Configuration reading from export_dir and writing to output_dir."""
    return deep_merge(copy.deepcopy(DEFAULT_CONFIG), {
        'source': {
            'mode': 'directory',
            'export_directory': str(export_dir),
        },
        'publish': {
            'output_directory': str(output_dir),
            'max_workers': 2,
        },
    })
