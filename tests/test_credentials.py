import sys
import unittest
from pathlib import Path

# Ensure src/ is on sys.path so we can import the package without installation
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from playsignage.credentials import CREDENTIAL_TYPE, PlaySignageCredentials  # noqa: E402
from playsignage.errors import CredentialsError  # noqa: E402


class CredentialsTests(unittest.TestCase):
    def test_from_env(self):
        credentials = PlaySignageCredentials.from_env({"PLAYSIGNAGE_API_KEY": "abc"})
        self.assertEqual(credentials.api_key, "abc")

    def test_from_env_missing(self):
        with self.assertRaises(CredentialsError):
            PlaySignageCredentials.from_env({})

    def test_from_env_blank(self):
        with self.assertRaises(CredentialsError):
            PlaySignageCredentials.from_env({"PLAYSIGNAGE_API_KEY": "  "})

    def test_from_mapping(self):
        self.assertEqual(PlaySignageCredentials.from_mapping({"apiKey": "k"}).api_key, "k")

    def test_from_mapping_missing_key(self):
        with self.assertRaises(CredentialsError):
            PlaySignageCredentials.from_mapping({})

    def test_immutable(self):
        credentials = PlaySignageCredentials(api_key="k")
        with self.assertRaises(AttributeError):
            credentials.api_key = "other"  # type: ignore[misc]

    def test_repr_hides_key(self):
        self.assertNotIn("secret", repr(PlaySignageCredentials(api_key="secret")))

    def test_credential_type(self):
        self.assertEqual(CREDENTIAL_TYPE["name"], "playSignageApi")
        self.assertEqual([p["name"] for p in CREDENTIAL_TYPE["properties"]], ["apiKey"])
