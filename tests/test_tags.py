import logging
import sys
import unittest
from pathlib import Path

# Ensure src/ is on sys.path so we can import the package without installation
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from playsignage.resources.tags import Tags  # noqa: E402


class DummyClient:
    def __init__(self, response=None) -> None:
        self._logger = logging.getLogger("playsignage.tests")
        self.node_name = "PlaySignage"
        self.response = {} if response is None else response
        self.request_calls: list[tuple[str, str, object, object, object]] = []

    def request(self, method, path, body=None, query=None, timeout=None):
        self.request_calls.append((method, path, body, query, timeout))
        return self.response


class TagsTests(unittest.TestCase):
    def setUp(self) -> None:
        self.client = DummyClient()
        self.tags = Tags(self.client)  # type: ignore[arg-type]

    def test_list(self):
        self.client.response = [{"uuid": "abc"}]
        self.assertEqual(self.tags.list(), [{"uuid": "abc"}])
        self.assertEqual(self.client.request_calls, [("GET", "tags", {}, None, None)])

    def test_remove(self):
        self.tags.remove("abc")
        self.assertEqual(self.client.request_calls, [("DELETE", "tags/abc", {}, None, None)])

    def test_activate(self):
        self.client.response = {"active": True}
        result = self.tags.activate("abc", 5000, timeout=4)
        self.assertEqual(result, {"active": True})
        self.assertEqual(
            self.client.request_calls,
            [("POST", "tags/abc/activate", {"duration": 5000}, None, 4)],
        )

    def test_deactivate(self):
        self.tags.deactivate("abc")
        self.assertEqual(self.client.request_calls, [("POST", "tags/abc/deactivate", {}, None, None)])
