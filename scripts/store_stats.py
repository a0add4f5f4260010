"""
Print the record count of every collection in the data file.

Usage:
  python scripts/store_stats.py
  python scripts/store_stats.py --data-file data/hrms.json
"""
import argparse
import sys
from pathlib import Path

# Add project root so smartbizflow is importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from smartbizflow.core.config import settings
from smartbizflow.core.exceptions import StoreError
from smartbizflow.db.store import RecordStore
from smartbizflow.services.dashboard_service import get_store_stats


def main():
    parser = argparse.ArgumentParser(description="Show record counts per collection")
    parser.add_argument("--data-file", default=settings.DATA_FILE, help="Data file to inspect")
    args = parser.parse_args()

    if not Path(args.data_file).exists():
        print(f"Data file not found: {args.data_file}")
        sys.exit(1)

    try:
        with RecordStore(args.data_file, seed_demo_data=False) as store:
            stats = get_store_stats(store)
    except StoreError as e:
        print(f"Cannot read {args.data_file}: {e}")
        sys.exit(1)

    for name, count in stats["collections"].items():
        print(f"  {name:<20} {count}")
    print(f"  {'total':<20} {stats['totalRecords']}")


if __name__ == "__main__":
    main()
