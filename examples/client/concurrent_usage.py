"""
Concurrent usage example of DispenserClient.

Several threads request the same dev kit at once; each one should come
back with its own archive and, inside it, its own license.
"""

import logging
import sys
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

# Add the project root to the path to import kitdispenser
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from kitdispenser.client.client import DispenserClient, DispenserClientError


def request_bundle(slug: str) -> str:
    client = DispenserClient(log_level=logging.WARNING)
    try:
        return client.dispense(slug).zip_name
    except DispenserClientError as e:
        return f"refused: {e.code}"


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    logger = logging.getLogger(__name__)

    slug = sys.argv[1] if len(sys.argv) > 1 else "kitA-NVIDIA-v2"
    workers = int(sys.argv[2]) if len(sys.argv) > 2 else 4

    with ThreadPoolExecutor(max_workers=workers) as executor:
        for result in executor.map(request_bundle, [slug] * workers):
            logger.info("%s -> %s", slug, result)


if __name__ == "__main__":
    main()
