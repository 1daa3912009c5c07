import importlib
import os
import shutil
import tempfile
import unittest
from unittest.mock import patch

from providerfinder import config
from providerfinder.commands.doctor import check_sources
from providerfinder.utils.module_registry import SERVICES_PREFIX

doctor_module = importlib.import_module("providerfinder.commands.doctor")


@patch.object(doctor_module, "logger")
class TestCheckSources(unittest.TestCase):

    def setUp(self):
        self.home = tempfile.mkdtemp()
        self.search_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.home)
        shutil.rmtree(self.search_dir)

    def test_empty_environment(self, mock_logger):
        self.assertTrue(check_sources(home=self.home, search_path=[self.search_dir]))
        mock_logger.warning.assert_not_called()
        mock_logger.error.assert_not_called()

    def test_readable_config_file(self, mock_logger):
        config_path = config.config_paths(self.home)[0]
        config.save_config({"mylib.Factory": "impl.Factory"}, config_path)
        self.assertTrue(check_sources(home=self.home, search_path=[self.search_dir]))
        mock_logger.success.assert_any_call(f"Configuration file: {config_path} (1 entries)")

    def test_malformed_config_file(self, mock_logger):
        config_path = config.config_paths(self.home)[1]
        os.makedirs(os.path.dirname(config_path))
        with open(config_path, "w") as f:
            f.write("key = \"unterminated\n")
        self.assertFalse(check_sources(home=self.home, search_path=[self.search_dir]))
        mock_logger.error.assert_called_once()

    def test_deprecated_directory_reported(self, mock_logger):
        os.makedirs(os.path.join(self.search_dir, SERVICES_PREFIX))
        check_sources(home=self.home, search_path=[self.search_dir])
        mock_logger.warning.assert_called_once()
        self.assertIn(self.search_dir, mock_logger.warning.call_args[0][0])


if __name__ == "__main__":
    unittest.main()
