import os
import shutil
import tempfile
import unittest
from unittest.mock import patch

from providerfinder.utils.legacy_registry import LegacyRegistry
from providerfinder.utils.module_registry import SERVICES_PREFIX


class TestLegacyRegistry(unittest.TestCase):

    def setUp(self):
        self.first_dir = tempfile.mkdtemp()
        self.second_dir = tempfile.mkdtemp()
        self.registry = LegacyRegistry(search_path=[self.first_dir, self.second_dir])

    def tearDown(self):
        shutil.rmtree(self.first_dir)
        shutil.rmtree(self.second_dir)

    def write_resource(self, base, name, content, mode="w"):
        services_dir = os.path.join(base, SERVICES_PREFIX)
        os.makedirs(services_dir, exist_ok=True)
        with open(os.path.join(services_dir, name), mode) as f:
            f.write(content)

    def test_missing_resource(self):
        self.assertIsNone(self.registry.read("OldFactory"))

    def test_reads_first_line(self):
        self.write_resource(self.second_dir, "OldFactory", "com.example.Impl\nignored.Other\n")
        self.assertEqual(self.registry.read("OldFactory"), "com.example.Impl")

    def test_first_search_path_entry_wins(self):
        self.write_resource(self.first_dir, "OldFactory", "first.Impl\n")
        self.write_resource(self.second_dir, "OldFactory", "second.Impl\n")
        self.assertEqual(self.registry.read("OldFactory"), "first.Impl")

    def test_blank_resource(self):
        self.write_resource(self.first_dir, "OldFactory", "\n")
        self.write_resource(self.second_dir, "OldFactory", "second.Impl\n")
        self.assertIsNone(self.registry.read("OldFactory"))

    @patch("providerfinder.utils.legacy_registry.logger")
    def test_undecodable_resource_is_reported(self, mock_logger):
        self.write_resource(self.first_dir, "OldFactory", b"\xff\xfe\xfa", mode="wb")
        self.assertIsNone(self.registry.read("OldFactory"))
        mock_logger.error.assert_called_once()


if __name__ == "__main__":
    unittest.main()
