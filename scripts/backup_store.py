"""
Copy the JSON data file to a timestamped backup.

Usage:
  python scripts/backup_store.py
  python scripts/backup_store.py --data-file data/hrms.json --out-dir backups
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
from smartbizflow.utils.datetime_utils import now_utc

logger = get_logger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Back up the record store data file")
    parser.add_argument("--data-file", default=settings.DATA_FILE, help="Data file to back up")
    parser.add_argument("--out-dir", default="backups", help="Directory for backup files")
    args = parser.parse_args()

    setup_logging()
    data_file = Path(args.data_file)
    if not data_file.exists():
        print(f"Data file not found: {data_file}")
        sys.exit(1)

    destination = Path(args.out_dir) / f"{data_file.stem}-{now_utc().strftime('%Y%m%dT%H%M%SZ')}.json"
    try:
        with RecordStore(data_file, seed_demo_data=False) as store:
            store.backup(destination)
    except StoreError as e:
        logger.error("Backup failed: %s", e)
        sys.exit(1)
    print(f"Backup written to {destination}")


if __name__ == "__main__":
    main()
