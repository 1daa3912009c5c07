import os
import unittest
from unittest.mock import patch
from providerfinder.utils.property_lookup import PropertyLookup


class TestPropertyLookup(unittest.TestCase):

    def test_get_from_mapping(self):
        lookup = PropertyLookup({"mylib.factories.MessageFactory": "impl.Factory"})
        self.assertEqual(lookup.get("mylib.factories.MessageFactory"), "impl.Factory")
        self.assertIsNone(lookup.get("mylib.factories.Other"))

    def test_defaults_to_environment(self):
        with patch.dict(os.environ, {"mylib.factories.MessageFactory": "env.Factory"}):
            self.assertEqual(PropertyLookup().get("mylib.factories.MessageFactory"), "env.Factory")

    @patch("providerfinder.utils.property_lookup.logger")
    def test_lookup_is_traced(self, mock_logger):
        PropertyLookup({}).get("OldFactory")
        mock_logger.debug.assert_called_once_with("Checking system property OldFactory")
        mock_logger.found.assert_called_once_with(None)


if __name__ == "__main__":
    unittest.main()
