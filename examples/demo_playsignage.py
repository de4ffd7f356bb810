"""CLI demo that exercises :class:`playsignage.PlaySignageNode`.

Run with the virtual environment activated::

    PLAYSIGNAGE_API_KEY=... python examples/demo_playsignage.py [tag-uuid]

Without a tag UUID the demo pings the API and lists tags, screens and
playlists. With one it activates the tag for ten seconds.
"""

import logging
import os
import sys
from pprint import pprint

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC_DIR = os.path.join(PROJECT_ROOT, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from playsignage import ExecutionContext, PlaySignageCredentials, PlaySignageNode

logging.basicConfig(level=logging.INFO)

def main() -> None:
    node = PlaySignageNode.from_credentials(PlaySignageCredentials.from_env())

    if len(sys.argv) > 1:
        context = ExecutionContext(
            items=[{}],
            parameters={"operation": "activate-tag", "tag-uuid": sys.argv[1], "duration": 10000},
        )
        pprint(node.execute(context))
        return

    for operation in ("ping", "get-tags"):
        print(f"\n{operation}:")
        pprint(node.execute(ExecutionContext(items=[{}], parameters={"operation": operation})))

    print("\nScreens:")
    pprint(node.get_screens())
    print("\nPlaylists:")
    pprint(node.get_playlists())


if __name__ == "__main__":
    main()
