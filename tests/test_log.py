import os
import shutil
import tempfile
import unittest
from unittest.mock import patch
from click.testing import CliRunner
from providerfinder import cli_logger
from providerfinder.cli_logger import Logger, get_latest_log_file, list_log_files
from providerfinder.main import cli


class TestLogger(unittest.TestCase):

    def setUp(self):
        self.root = tempfile.mkdtemp()
        self.log_dir = os.path.join(self.root, "logs")

    def tearDown(self):
        shutil.rmtree(self.root)

    def test_construction_does_not_touch_disk(self):
        Logger(log_dir=self.log_dir)
        self.assertFalse(os.path.exists(self.log_dir))

    def test_first_record_creates_log_file(self):
        log = Logger(log_dir=self.log_dir, verbose=False)
        log.debug("Checking system property mylib.Factory")
        self.assertTrue(os.path.isfile(log.log_file))
        with open(log.log_file) as f:
            self.assertIn("[DEBUG] Checking system property mylib.Factory", f.read())

    def test_list_log_files_without_directory(self):
        self.assertEqual(list_log_files(self.log_dir), [])
        self.assertIsNone(get_latest_log_file(self.log_dir))


class TestLogCommand(unittest.TestCase):

    def setUp(self):
        self.runner = CliRunner()
        self.log_dir = tempfile.mkdtemp()
        self.log_path = os.path.join(self.log_dir, "providerfinder_20260101_000000.log")
        with open(self.log_path, "w") as f:
            f.write("[10:00:00] [INFO] Resolving provider for mylib.Factory...\n")
            f.write("[10:00:01] [WARNING] Using non-standard property: OldFactory.\n")
        patcher = patch.object(cli_logger.logger, "log_dir", self.log_dir)
        patcher.start()
        self.addCleanup(patcher.stop)

    def tearDown(self):
        shutil.rmtree(self.log_dir)

    def test_list(self):
        result = self.runner.invoke(cli, ["log", "--list"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn(f"Available log files in {self.log_dir}:", result.output)
        self.assertIn("providerfinder_20260101_000000.log", result.output)

    def test_show_latest(self):
        result = self.runner.invoke(cli, ["log"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn(f"Displaying log file: {self.log_path}", result.output)
        self.assertIn("Resolving provider for mylib.Factory", result.output)

    def test_filter_by_level(self):
        result = self.runner.invoke(cli, ["log", "--level", "warning"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("Using non-standard property", result.output)
        self.assertNotIn("Resolving provider", result.output)

    def test_missing_named_file(self):
        result = self.runner.invoke(cli, ["log", "--filename", "nope.log"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("No log files found", result.output)


if __name__ == "__main__":
    unittest.main()
