import logging
import math
import re
from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd

from ddf_api.models import Listing, ListingsPage, Statistics
from ddf_api.store import ListingStore

LOG = logging.getLogger("repo")

DEFAULT_STATUS = "Active"
DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 20

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")
_LEADING_DECIMAL = re.compile(r"^\s*([+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")


def parse_int(raw: Any) -> Optional[int]:
    """Leading-integer parse: "12" -> 12, "12.7" -> 12, "12abc" -> 12, "abc" -> None."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    m = _LEADING_INT.match(str(raw))
    if not m:
        return None
    try:
        return int(m.group(1))
    except ValueError:
        # digit run past the interpreter's int conversion limit
        return None


def parse_decimal(raw: Any) -> Optional[float]:
    """Leading-decimal parse: "2.5" -> 2.5, "2.5+" -> 2.5, "1e1" -> 10.0, "x" -> None."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        return float(raw)
    m = _LEADING_DECIMAL.match(str(raw))
    return float(m.group(1)) if m else None


def _positive_or(raw: Any, default: int) -> int:
    v = parse_int(raw)
    return v if v is not None and v >= 1 else default


def _apply_filters(frame: pd.DataFrame, q: Dict[str, Any]) -> pd.DataFrame:
    """Narrow the store frame to the rows matching `q` and order them by price."""
    mask = np.ones(len(frame), dtype=bool)

    # numeric ranges
    if (v := parse_int(q.get("min_price"))) is not None:
        mask &= (frame["price"] >= v).to_numpy()
    if (v := parse_int(q.get("max_price"))) is not None:
        mask &= (frame["price"] <= v).to_numpy()
    if (v := parse_int(q.get("beds"))) is not None:
        mask &= (frame["beds"] >= v).to_numpy()
    if (v := parse_decimal(q.get("baths"))) is not None:
        mask &= (frame["baths"] >= v).to_numpy()

    # text filters (case-insensitive)
    if (v := q.get("city")):
        mask &= frame["city_lc"].str.contains(str(v).lower(), regex=False).to_numpy(dtype=bool)
    if (v := q.get("property_type")):
        mask &= (frame["subtype_lc"] == str(v).lower()).to_numpy()

    # status is always applied
    status = q.get("status") or DEFAULT_STATUS
    mask &= (frame["status"] == status).to_numpy()

    # Sorting: price, fixture order breaks ties
    ascending = q.get("sort_order") == "asc"
    return frame[mask].sort_values(["price", "position"], ascending=[ascending, True])


def search(store: ListingStore, q: Dict[str, Any]) -> ListingsPage:
    """
    Returns one page of listings matching the filters in `q`.
    `q` holds raw query-string values; malformed ones fall back to "not applied"
    or to the default instead of raising.
    """
    page = _positive_or(q.get("page"), DEFAULT_PAGE)
    size = _positive_or(q.get("limit"), DEFAULT_PAGE_SIZE)
    offset = (page - 1) * size

    matched = _apply_filters(store.frame, q)

    # total count without pagination
    total = len(matched)

    positions = matched["position"].tolist()[offset:offset + size]
    LOG.debug("search q=%s total=%d page=%d size=%d", q, total, page, size)
    return ListingsPage(
        listings=[store.at(p) for p in positions],
        total=total,
        page=page,
        total_pages=-(-total // size),
    )


def get_by_key(store: ListingStore, listing_key: str) -> Optional[Listing]:
    """Returns one listing by its ListingKey, or None if not found."""
    return store.get(listing_key)


def list_cities(store: ListingStore) -> List[str]:
    """Distinct cities across the whole store, any status, sorted."""
    return sorted(store.frame["city"].unique().tolist())


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def statistics(store: ListingStore) -> Statistics:
    """Aggregates over the whole store (not status-filtered)."""
    frame = store.frame
    prices = frame["price"]
    if prices.empty:
        avg = lo = hi = None
    else:
        avg = _round_half_up(float(prices.mean()))
        lo = int(prices.min())
        hi = int(prices.max())

    return Statistics(
        total_listings=len(frame),
        average_price=avg,
        min_price=lo,
        max_price=hi,
        cities_count=int(frame["city"].nunique()),
        property_types=pd.unique(frame["subtype"]).tolist(),
    )
