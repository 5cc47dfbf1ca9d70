"""
Basic usage example of DispenserClient.

This example asks a running dispenser server for a dev kit bundle and
downloads the resulting archive into ./downloads.
"""

import logging
import sys
from pathlib import Path

# Add the project root to the path to import kitdispenser
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from kitdispenser.client.client import DispenserClient, DispenserClientError


def main() -> None:
    # Configure logging
    logging.basicConfig(level=logging.INFO)
    logger = logging.getLogger(__name__)

    slug = sys.argv[1] if len(sys.argv) > 1 else "kitA-NVIDIA-v2"
    client = DispenserClient(log_level=logging.INFO)

    try:
        path = client.fetch(slug, Path("downloads"))
    except DispenserClientError as e:
        logger.error("Dispenser refused %s (%s): %s", slug, e.code, e)
        sys.exit(1)

    logger.info("Bundle saved to %s", path)


if __name__ == "__main__":
    main()
