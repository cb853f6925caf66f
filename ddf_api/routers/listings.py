# ddf_api/routers/listings.py
from typing import Optional, Dict, Any, List
from fastapi import APIRouter, Depends, Query, HTTPException

from ddf_api.deps import get_store, internal_errors, simulate_latency
from ddf_api.models import ApiResponse, Listing, ListingsPage, Statistics
from ddf_api.repository import listings as repo
from ddf_api.store import ListingStore

router = APIRouter(prefix="/api", tags=["listings"])

# Every query parameter is a plain optional string: malformed numbers must
# reach the repository untouched and degrade there, never as a 422.


@router.get(
    "/listings",
    response_model=ApiResponse[ListingsPage],
    response_model_exclude_none=True,
    dependencies=[Depends(simulate_latency)],
)
def list_listings(
    minPrice: Optional[str]     = Query(None),
    maxPrice: Optional[str]     = Query(None),
    city: Optional[str]         = Query(None, description="Case-insensitive substring"),
    beds: Optional[str]         = Query(None, description="Minimum bedrooms"),
    baths: Optional[str]        = Query(None, description="Minimum bathrooms, decimals allowed"),
    propertyType: Optional[str] = Query(None, description="Detached, Semi-Detached, Townhouse, Condo, ..."),
    status: Optional[str]       = Query(None, description="Defaults to Active"),
    page: Optional[str]         = Query(None, description="1-based, default 1"),
    limit: Optional[str]        = Query(None, description="Page size, default 20"),
    sortOrder: Optional[str]    = Query(None, description="'asc' for cheapest first, otherwise highest first"),
    store: ListingStore = Depends(get_store),
):
    q: Dict[str, Any] = {
        "min_price": minPrice,
        "max_price": maxPrice,
        "city": city,
        "beds": beds,
        "baths": baths,
        "property_type": propertyType,
        "status": status,
        "page": page,
        "limit": limit,
        "sort_order": sortOrder,
    }

    with internal_errors("Failed to fetch listings"):
        result = repo.search(store, q)
    return ApiResponse[ListingsPage](data=result)


@router.get(
    "/listings/{listing_key}",
    response_model=ApiResponse[Listing],
    response_model_exclude_none=True,
    dependencies=[Depends(simulate_latency)],
)
def get_listing(listing_key: str, store: ListingStore = Depends(get_store)):
    with internal_errors("Failed to fetch listing details"):
        listing = repo.get_by_key(store, listing_key)
    if listing is None:
        raise HTTPException(
            status_code=404,
            detail={"error": "Listing not found", "message": f"No listing found with key: {listing_key}"},
        )
    return ApiResponse[Listing](data=listing)


@router.get("/cities", response_model=ApiResponse[List[str]])
def list_cities(store: ListingStore = Depends(get_store)):
    with internal_errors("Failed to fetch cities"):
        cities = repo.list_cities(store)
    return ApiResponse[List[str]](data=cities)


@router.get("/statistics", response_model=ApiResponse[Statistics])
def get_statistics(store: ListingStore = Depends(get_store)):
    with internal_errors("Failed to fetch statistics"):
        stats = repo.statistics(store)
    return ApiResponse[Statistics](data=stats)
