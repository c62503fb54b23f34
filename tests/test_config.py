"""
Unit tests for gitdigger.config module
"""
import unittest
import tempfile
import os
import shutil
import json
import logging
from pathlib import Path
from unittest.mock import patch

from gitdigger.config import (
    load_config,
    get_config_path,
    get_default_config,
    merge_configs,
    configure_logging,
)


class TestConfigManagement(unittest.TestCase):
    """Test configuration management functionality"""

    def setUp(self):
        """Set up test environment"""
        self.temp_dir = tempfile.mkdtemp()
        self.env = patch.dict(os.environ, {'HOME': self.temp_dir})
        self.env.start()
        os.environ.pop('GITDIGGER_CONFIG', None)
        self.config_dir = Path(self.temp_dir) / '.gitdigger'

    def tearDown(self):
        """Clean up test environment"""
        self.env.stop()
        shutil.rmtree(self.temp_dir)

    def test_get_default_config(self):
        """Test default configuration structure"""
        config = get_default_config()

        self.assertEqual(config['forges']['gitlab'], [])
        self.assertIsNone(config['git']['timeout_seconds'])
        self.assertIsNone(config['git']['clone_depth'])
        self.assertTrue(config['network']['check_reachability'])
        self.assertEqual(config['network']['timeout_seconds'], 10)
        self.assertIn('level', config['logging'])
        self.assertIn('format', config['logging'])

    def test_default_config_path(self):
        """Test the default path when no file exists"""
        self.assertEqual(get_config_path(), self.config_dir / 'config.json')

    def test_load_config_no_file(self):
        """Test loading config when no file exists"""
        self.assertEqual(load_config(), get_default_config())

    def test_load_config_json_file(self):
        """Test loading config from JSON file"""
        self.config_dir.mkdir()
        with open(self.config_dir / 'config.json', 'w') as f:
            json.dump({'network': {'timeout_seconds': 3}, 'logging': {'level': 'DEBUG'}}, f)

        config = load_config()

        self.assertEqual(config['network']['timeout_seconds'], 3)
        self.assertTrue(config['network']['check_reachability'])
        self.assertEqual(config['logging']['level'], 'DEBUG')

    def test_load_config_toml_file(self):
        """Test loading config from TOML file"""
        self.config_dir.mkdir()
        (self.config_dir / 'config.toml').write_text("""
[forges]
gitlab = ["gitlab.gnome.org"]

[git]
clone_depth = 1
""")

        config = load_config()

        self.assertEqual(config['forges']['gitlab'], ['gitlab.gnome.org'])
        self.assertEqual(config['git']['clone_depth'], 1)

    def test_load_config_yaml_file(self):
        """Test loading config from YAML file"""
        self.config_dir.mkdir()
        (self.config_dir / 'config.yaml').write_text(
            "network:\n  check_reachability: false\n"
        )

        config = load_config()

        self.assertFalse(config['network']['check_reachability'])

    def test_config_env_path(self):
        """Test GITDIGGER_CONFIG points at an explicit file"""
        path = Path(self.temp_dir) / 'custom.json'
        path.write_text(json.dumps({'git': {'timeout_seconds': 600}}))

        with patch.dict(os.environ, {'GITDIGGER_CONFIG': str(path)}):
            config = load_config()

        self.assertEqual(config['git']['timeout_seconds'], 600)

    def test_invalid_config_file_falls_back_to_defaults(self):
        """Test a broken config file is logged and ignored"""
        self.config_dir.mkdir()
        (self.config_dir / 'config.json').write_text("{not json")

        with self.assertLogs('gitdigger', level='ERROR'):
            config = load_config()

        self.assertEqual(config, get_default_config())

    @patch.dict(os.environ, {'GITDIGGER_NETWORK_CHECK_REACHABILITY': 'false'})
    def test_environment_override(self):
        """Test environment variable override"""
        config = load_config()
        self.assertFalse(config['network']['check_reachability'])

    @patch.dict(os.environ, {'GITDIGGER_GIT_CLONE_DEPTH': '1',
                             'GITDIGGER_LOGGING_LEVEL': 'warning'})
    def test_typed_environment_overrides(self):
        """Test numeric and string environment overrides"""
        config = load_config()
        self.assertEqual(config['git']['clone_depth'], 1)
        self.assertEqual(config['logging']['level'], 'warning')

    @patch.dict(os.environ, {'GITDIGGER_FORGES_GITLAB': 'gitlab.gnome.org, invent.kde.org'})
    def test_list_environment_override(self):
        """Test comma-separated values for list settings"""
        config = load_config()
        self.assertEqual(config['forges']['gitlab'], ['gitlab.gnome.org', 'invent.kde.org'])

    @patch.dict(os.environ, {'GITDIGGER_FORGES_GITLAB': 'gitlab.gnome.org'})
    def test_single_value_list_environment_override(self):
        """Test a single host becomes a one-element list"""
        config = load_config()
        self.assertEqual(config['forges']['gitlab'], ['gitlab.gnome.org'])

    @patch.dict(os.environ, {'GITDIGGER_UNKNOWN_SECTION': 'x'})
    def test_unknown_environment_override_is_ignored(self):
        """Test unmatched variables leave the config alone"""
        self.assertEqual(load_config(), get_default_config())

    def test_merge_configs(self):
        """Test recursive merge"""
        merged = merge_configs(
            {'a': {'b': 1, 'c': 2}, 'd': 3},
            {'a': {'c': 4}, 'e': 5}
        )
        self.assertEqual(merged, {'a': {'b': 1, 'c': 4}, 'd': 3, 'e': 5})


class TestConfigureLogging(unittest.TestCase):
    """Test log level selection"""

    def setUp(self):
        self.logger = logging.getLogger('gitdigger')
        self.original_level = self.logger.level
        self.original_formatters = [h.formatter for h in logging.getLogger().handlers]

    def tearDown(self):
        self.logger.setLevel(self.original_level)
        for handler, formatter in zip(logging.getLogger().handlers, self.original_formatters):
            handler.setFormatter(formatter)

    def test_configured_level(self):
        config = get_default_config()
        config['logging']['level'] = 'warning'
        self.assertEqual(configure_logging(config), logging.WARNING)
        self.assertEqual(self.logger.level, logging.WARNING)

    def test_verbose_and_quiet(self):
        self.assertEqual(configure_logging(verbose=True), logging.DEBUG)
        self.assertEqual(configure_logging(quiet=True), logging.ERROR)

    def test_unknown_level_falls_back_to_info(self):
        config = get_default_config()
        config['logging']['level'] = 'LOUD'
        self.assertEqual(configure_logging(config), logging.INFO)


if __name__ == '__main__':
    unittest.main()
