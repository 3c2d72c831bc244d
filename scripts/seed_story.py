"""
Seed the story timeline with the configured default milestones.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from wedding.dependencies import get_db_client
from wedding.story import seed_story


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed the story timeline")
    parser.add_argument(
        "--force",
        action="store_true",
        help="Replace existing milestones",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(name)s %(levelname)s %(asctime)s %(message)s",
        datefmt="%m/%d/%Y %I:%M:%S %p",
    )

    seed_story(get_db_client(), force=args.force)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
