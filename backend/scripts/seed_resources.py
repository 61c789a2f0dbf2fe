"""CLI script to load the demonstration records into the backend DB.
Usage: python scripts/seed_resources.py [--resource KEY ...] [--force]
"""
import sys
import argparse
import pathlib
from typing import List, Optional
# Ensure `backend/` is on sys.path so `tracker_api` imports work when running this script directly
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
from sqlmodel import Session
from tracker_api.database import engine, create_db_and_tables
from tracker_api.errors import TrackerError
from tracker_api.resources import RESOURCES, SEED_EMPTY_ONLY
from tracker_api import services


def main(keys: Optional[List[str]] = None, force: bool = False) -> int:
    """Seed every seedable resource, or only those named in `keys`.

    Resources that only accept seed data while empty are skipped with a
    message unless `force` is set, in which case they are emptied first.
    Returns the number of resources that failed.
    """
    create_db_and_tables()
    specs = [RESOURCES[k] for k in keys] if keys else [s for s in RESOURCES.values() if s.seedable]
    failures = 0
    with Session(engine) as session:
        for spec in specs:
            svc = services.ResourceService(session, spec)
            try:
                if force and spec.seed_mode == SEED_EMPTY_ONLY:
                    removed = svc.repo.clear()
                    print(f'{spec.key}: removed {removed} existing rows')
                result = svc.seed()
                print(f'{spec.key}: {result["message"]}')
            except TrackerError as e:
                failures += 1
                print(f'{spec.key}: skipped ({e.message})')
    return failures


if __name__ == '__main__':
    parser = argparse.ArgumentParser()
    parser.add_argument('--resource', action='append', choices=sorted(RESOURCES), help='Seed only this resource (repeatable)')
    parser.add_argument('--force', action='store_true', help='Empty tables that refuse to seed while populated')
    args = parser.parse_args()
    sys.exit(1 if main(keys=args.resource, force=args.force) else 0)
