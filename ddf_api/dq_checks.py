# -*- coding: utf-8 -*-
"""
Standalone Data-Quality Checker for the listings fixture

Checks:
  • store not empty
  • at least one Active listing (searches default to Active only)
  • postal code coverage (Canadian "A1A 1A1" format)
  • photo coverage (listings with no photos)
  • coordinates inside Canada's bounding box

Exit codes:
  0 = OK
  1 = DQ issues found
  2 = fixture missing or malformed

Usage
-----
$ export LISTINGS_FIXTURE="/abs/path/to/mock_listings.json"   # optional
$ python -m ddf_api.dq_checks [path]
"""

import sys
from pathlib import Path
from typing import List, Optional, Union

import pandas as pd

from ddf_api.config import Settings
from ddf_api.errors import DataUnavailable
from ddf_api.store import ListingStore

POSTAL_CODE = r"^[A-Za-z]\d[A-Za-z] ?\d[A-Za-z]\d$"
POSTAL_COVERAGE_MIN = 0.95

LAT_RANGE = (41.6, 83.2)
LON_RANGE = (-141.1, -52.5)


def _details(store: ListingStore) -> pd.DataFrame:
    """Columns the query frame leaves out, one row per listing."""
    return pd.DataFrame(
        {
            "key": [l.listing_key for l in store.listings],
            "postal_code": [l.postal_code for l in store.listings],
            "photo_count": [len(l.photos) for l in store.listings],
            "latitude": [l.latitude for l in store.listings],
            "longitude": [l.longitude for l in store.listings],
        },
        columns=["key", "postal_code", "photo_count", "latitude", "longitude"],
    )


def check_store(store: ListingStore) -> List[str]:
    issues: List[str] = []

    # 1) Non-empty snapshot?
    if len(store) == 0:
        issues.append("Fixture contains no listings.")
        return issues

    # 2) Something for the default search to show
    if not (store.frame["status"] == "Active").any():
        issues.append("No Active listings; default searches will return nothing.")

    df = _details(store)

    # 3) Postal code coverage
    cov = float(df["postal_code"].str.match(POSTAL_CODE).mean())
    if cov < POSTAL_COVERAGE_MIN:
        issues.append(f"Postal code coverage low: {cov:.2%} (<{POSTAL_COVERAGE_MIN:.0%})")

    # 4) Photo coverage
    no_photos = df.loc[df["photo_count"] == 0, "key"].tolist()
    if no_photos:
        issues.append(f"{len(no_photos)} listing(s) without photos: {', '.join(no_photos)}")

    # 5) Geolocation sanity
    outside = df.loc[
        ~df["latitude"].between(*LAT_RANGE) | ~df["longitude"].between(*LON_RANGE), "key"
    ].tolist()
    if outside:
        issues.append(f"{len(outside)} listing(s) with coordinates outside Canada: {', '.join(outside)}")

    return issues


def run_checks(path: Union[str, Path]) -> List[str]:
    """Load the fixture and return the DQ issues found. Raises DataUnavailable."""
    return check_store(ListingStore.load(path))


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    path = argv[0] if argv else Settings.from_env().fixture_path

    try:
        issues = run_checks(path)
    except DataUnavailable as e:
        print(f"ERROR: DQ checks could not run: {e}", file=sys.stderr)
        return 2

    # Report
    if issues:
        print("❌ Data Quality Issues Detected:")
        for i in issues:
            print(" -", i)
        return 1
    print("✅ Data Quality Passed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
