"""Tests for configuration loading, merging and validation."""

import argparse
import copy

import pytest

from config_loader import ConfigLoader, DEFAULT_CONFIG, deep_merge, get_nested


def namespace(**overrides):
    values = dict(
        archive=None, export_dir=None, config_page=None, output_dir=None,
        index=None, workers=None, dry_run=None, report=None, log_file=None
    )
    values.update(overrides)
    return argparse.Namespace(**values)


class TestLoad:

    def test_defaults_without_path(self):
        config = ConfigLoader.load()

        assert config == DEFAULT_CONFIG
        assert config is not DEFAULT_CONFIG
        assert get_nested(config, 'publish.default_index') == 'Website Index'
        assert get_nested(config, 'source.config_page') == 'roam/js/public-garden.md'

    def test_file_merged_over_defaults(self, tmp_path):
        path = tmp_path / 'config.yaml'
        path.write_text(
            "publish:\n"
            "  output_directory: ./site\n"
            "  max_workers: 8\n"
        )

        config = ConfigLoader.load(str(path))

        assert config['publish']['output_directory'] == './site'
        assert config['publish']['max_workers'] == 8
        assert config['publish']['default_index'] == 'Website Index'
        assert config['source']['mode'] == 'archive'

    def test_environment_substitution(self, tmp_path, monkeypatch):
        monkeypatch.setenv('GARDEN_EXPORT', '/data/export.zip')
        path = tmp_path / 'config.yaml'
        path.write_text("source:\n  archive_path: ${GARDEN_EXPORT}\n")

        config = ConfigLoader.load(str(path))

        assert config['source']['archive_path'] == '/data/export.zip'

    def test_unset_variable_left_in_place(self, tmp_path, monkeypatch):
        monkeypatch.delenv('GARDEN_MISSING', raising=False)
        path = tmp_path / 'config.yaml'
        path.write_text("source:\n  archive_path: ${GARDEN_MISSING}\n")

        config = ConfigLoader.load(str(path))

        assert config['source']['archive_path'] == '${GARDEN_MISSING}'
        with pytest.raises(ValueError, match='GARDEN_MISSING'):
            ConfigLoader.validate(config)

    def test_empty_file(self, tmp_path):
        path = tmp_path / 'config.yaml'
        path.write_text("")

        assert ConfigLoader.load(str(path)) == DEFAULT_CONFIG

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ConfigLoader.load(str(tmp_path / 'missing.yaml'))

    def test_non_mapping_file(self, tmp_path):
        path = tmp_path / 'config.yaml'
        path.write_text("- just\n- a list\n")

        with pytest.raises(ValueError):
            ConfigLoader.load(str(path))


class TestValidate:

    def test_defaults_are_valid(self):
        ConfigLoader.validate(copy.deepcopy(DEFAULT_CONFIG))

    def test_directory_mode_requires_existing_directory(self, tmp_path):
        config = deep_merge(DEFAULT_CONFIG, {
            'source': {'mode': 'directory', 'export_directory': str(tmp_path / 'missing')}
        })

        with pytest.raises(ValueError, match='export_directory'):
            ConfigLoader.validate(config)

    def test_directory_mode(self, export_dir):
        config = deep_merge(DEFAULT_CONFIG, {
            'source': {'mode': 'directory', 'export_directory': str(export_dir)}
        })

        ConfigLoader.validate(config)

    @pytest.mark.parametrize("override, message", [
        ({'source': {'mode': 'browser'}}, 'source.mode'),
        ({'source': {'archive_path': ''}}, 'source.archive_path'),
        ({'source': {'config_page': None}}, 'source.config_page'),
        ({'publish': {'default_index': ''}}, 'publish.default_index'),
        ({'publish': {'max_workers': 0}}, 'max_workers'),
        ({'publish': {'max_workers': True}}, 'max_workers'),
        ({'publish': {'dry_run': 'yes'}}, 'dry_run'),
        ({'render': {'markdown_extensions': 'extra'}}, 'markdown_extensions'),
    ])
    def test_invalid_values(self, override, message):
        config = deep_merge(DEFAULT_CONFIG, override)

        with pytest.raises(ValueError, match=message):
            ConfigLoader.validate(config)

    def test_output_path_is_a_file(self, tmp_path):
        target = tmp_path / 'out'
        target.write_text('')
        config = deep_merge(DEFAULT_CONFIG, {'publish': {'output_directory': str(target)}})

        with pytest.raises(ValueError, match='output_directory'):
            ConfigLoader.validate(config)


class TestMergeWithArgs:

    def test_no_arguments_keeps_config(self):
        merged = ConfigLoader.merge_with_args(DEFAULT_CONFIG, namespace())

        assert merged == DEFAULT_CONFIG

    def test_arguments_take_precedence(self):
        merged = ConfigLoader.merge_with_args(DEFAULT_CONFIG, namespace(
            archive='export.zip',
            config_page='settings.md',
            output_dir='site',
            index='Home',
            workers=2,
            dry_run=True,
            report='report.json',
            log_file='publish.log'
        ))

        assert merged['source']['mode'] == 'archive'
        assert merged['source']['archive_path'] == 'export.zip'
        assert merged['source']['config_page'] == 'settings.md'
        assert merged['publish'] == {
            'output_directory': 'site',
            'default_index': 'Home',
            'max_workers': 2,
            'dry_run': True,
            'report_path': 'report.json',
        }
        assert merged['logging']['file'] == 'publish.log'
        assert DEFAULT_CONFIG['publish']['output_directory'] == './out'

    def test_export_dir_switches_mode(self):
        merged = ConfigLoader.merge_with_args(DEFAULT_CONFIG, namespace(export_dir='export'))

        assert merged['source']['mode'] == 'directory'
        assert merged['source']['export_directory'] == 'export'

    def test_explicit_no_dry_run(self):
        config = deep_merge(DEFAULT_CONFIG, {'publish': {'dry_run': True}})

        merged = ConfigLoader.merge_with_args(config, namespace(dry_run=False))

        assert merged['publish']['dry_run'] is False


class TestHelpers:

    def test_deep_merge_does_not_mutate(self):
        base = {'a': {'b': 1, 'c': 2}}

        merged = deep_merge(base, {'a': {'c': 3}, 'd': 4})

        assert merged == {'a': {'b': 1, 'c': 3}, 'd': 4}
        assert base == {'a': {'b': 1, 'c': 2}}

    def test_get_nested(self):
        config = {'publish': {'output_directory': 'site'}}

        assert get_nested(config, 'publish.output_directory') == 'site'
        assert get_nested(config, 'publish.missing', 'fallback') == 'fallback'
        assert get_nested(config, 'publish.output_directory.deeper') is None
