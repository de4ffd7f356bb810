import logging
import sys
import unittest
from pathlib import Path

# Ensure src/ is on sys.path so we can import the package without installation
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from playsignage.resources.base import Resource  # noqa: E402


class DummyClient:
    def __init__(self) -> None:
        self._logger = logging.getLogger("playsignage.tests")
        self.node_name = "PlaySignage"
        self.calls: list[tuple[str, str, object, object, object]] = []

    def request(self, method, path, body=None, query=None, timeout=None):
        self.calls.append((method, path, body, query, timeout))
        return {"ok": True}


class BaseResourceTests(unittest.TestCase):
    def setUp(self) -> None:
        self.client = DummyClient()
        self.resource = Resource(self.client)  # type: ignore[arg-type]

    def test_logger_property(self):
        self.assertIs(self.resource._logger, self.client._logger)

    def test_node_name_property(self):
        self.assertEqual(self.resource._node_name, "PlaySignage")

    def test_request_passthrough(self):
        result = self.resource._request("GET", "x", {"b": 2}, query={"a": 1}, timeout=5)
        self.assertEqual(result, {"ok": True})
        self.assertEqual(self.client.calls[-1], ("GET", "x", {"b": 2}, {"a": 1}, 5))

    def test_get(self):
        self.resource._get("g", query={"q": 1}, timeout=2)
        self.assertEqual(self.client.calls[-1], ("GET", "g", {}, {"q": 1}, 2))

    def test_post(self):
        self.resource._post("p", {"x": 1}, timeout=3)
        self.assertEqual(self.client.calls[-1], ("POST", "p", {"x": 1}, None, 3))

    def test_post_without_body(self):
        self.resource._post("p")
        self.assertEqual(self.client.calls[-1], ("POST", "p", {}, None, None))

    def test_delete(self):
        self.resource._delete("d", timeout=6)
        self.assertEqual(self.client.calls[-1], ("DELETE", "d", {}, None, 6))
