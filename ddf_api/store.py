# -*- coding: utf-8 -*-
"""
store.py: the in-memory listing snapshot.

The fixture is a JSON document with a top-level ``listings`` array of DDF-shaped
objects. It is read once, validated into ``Listing`` models and mirrored into a
pandas DataFrame holding only the columns the query engine filters and sorts on:

  position, key, price, city, city_lc, beds, baths, subtype, subtype_lc, status

``position`` is the fixture order and serves as the sort tie-breaker. Nothing
writes to the store after ``load()``; concurrent readers need no locking.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple, Union

import pandas as pd
from pydantic import ValidationError

from ddf_api.errors import DataUnavailable
from ddf_api.models import Listing

LOG = logging.getLogger("store")

FRAME_DTYPES = {
    "position": "int64",
    "key": "object",
    "price": "int64",
    "city": "object",
    "city_lc": "object",
    "beds": "int64",
    "baths": "float64",
    "subtype": "object",
    "subtype_lc": "object",
    "status": "object",
}


def _build_frame(listings: Tuple[Listing, ...]) -> pd.DataFrame:
    rows = [
        {
            "position": i,
            "key": l.listing_key,
            "price": l.list_price,
            "city": l.city,
            "city_lc": l.city.lower(),
            "beds": l.bedrooms_total,
            "baths": l.bathroom_total,
            "subtype": l.property_sub_type,
            "subtype_lc": l.property_sub_type.lower(),
            "status": l.status,
        }
        for i, l in enumerate(listings)
    ]
    return pd.DataFrame(rows, columns=list(FRAME_DTYPES)).astype(FRAME_DTYPES)


class ListingStore:
    """Immutable listing collection plus its query frame."""

    def __init__(self, listings: Iterable[Listing]) -> None:
        self._listings: Tuple[Listing, ...] = tuple(listings)
        by_key: Dict[str, Listing] = {}
        for l in self._listings:
            if l.listing_key in by_key:
                raise DataUnavailable(f"Duplicate ListingKey in fixture: {l.listing_key}")
            by_key[l.listing_key] = l
        self._by_key = by_key
        self._frame = _build_frame(self._listings)

    @classmethod
    def from_document(cls, doc: object) -> "ListingStore":
        if not isinstance(doc, dict) or not isinstance(doc.get("listings"), list):
            raise DataUnavailable("Fixture must be an object with a top-level 'listings' array")

        listings = []
        for i, obj in enumerate(doc["listings"]):
            try:
                listings.append(Listing.model_validate(obj))
            except ValidationError as e:
                raise DataUnavailable(f"Invalid listing at index {i}: {e}") from e
        return cls(listings)

    @classmethod
    def load(cls, path: Union[str, Path]) -> "ListingStore":
        path = Path(path)
        try:
            doc = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            raise DataUnavailable(f"Listings fixture not found: {path}") from e
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise DataUnavailable(f"Listings fixture unreadable: {path}: {e}") from e

        store = cls.from_document(doc)
        LOG.info("Loaded %d listings from %s", len(store), path)
        return store

    # ---------- read-only access ----------

    @property
    def listings(self) -> Tuple[Listing, ...]:
        return self._listings

    @property
    def frame(self) -> pd.DataFrame:
        return self._frame

    def get(self, key: str) -> Optional[Listing]:
        return self._by_key.get(key)

    def at(self, position: int) -> Listing:
        return self._listings[position]

    def __len__(self) -> int:
        return len(self._listings)
