"""
Replace the JSON data file with the contents of a backup.

Usage:
  python scripts/restore_store.py backups/hrms-20260101T000000Z.json
  python scripts/restore_store.py backups/hrms-20260101T000000Z.json --yes
"""
import argparse
import sys
from pathlib import Path

# Add project root so smartbizflow is importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from smartbizflow.core.config import settings
from smartbizflow.core.exceptions import StoreError
from smartbizflow.core.logging import get_logger, setup_logging
from smartbizflow.db.store import RecordStore

logger = get_logger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Restore the record store from a backup file")
    parser.add_argument("source", help="Backup file to restore")
    parser.add_argument("--data-file", default=settings.DATA_FILE, help="Data file to overwrite")
    parser.add_argument("--yes", action="store_true", help="Do not ask for confirmation")
    args = parser.parse_args()

    setup_logging()
    if not args.yes:
        answer = input(f"Overwrite {args.data_file} with {args.source}? [y/N] ")
        if answer.strip().lower() != "y":
            print("Aborted.")
            return

    try:
        with RecordStore(args.data_file, seed_demo_data=False) as store:
            store.restore(args.source)
            counts = store.stats()
    except StoreError as e:
        logger.error("Restore failed: %s", e)
        sys.exit(1)
    print(f"Restored {sum(counts.values())} records into {args.data_file}")


if __name__ == "__main__":
    main()
