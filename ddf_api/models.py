from typing import Generic, List, Optional, TypeVar
from datetime import date
from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class Listing(BaseModel):
    """One property for sale. Field aliases are the CREA DDF names used on the wire."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # Business key (required, unique across the fixture)
    listing_key: str = Field(..., alias="ListingKey", min_length=1)

    list_price: int = Field(..., alias="ListPrice", ge=0, description="Whole currency units")
    street_address: str = Field(..., alias="StreetAddress")
    city: str = Field(..., alias="City")
    province: str = Field(..., alias="Province")
    postal_code: str = Field(..., alias="PostalCode")
    bedrooms_total: int = Field(..., alias="BedroomsTotal", ge=0)
    bathroom_total: float = Field(..., alias="BathroomTotal", ge=0)
    property_sub_type: str = Field(..., alias="PropertySubType")
    status: str = Field("Active", alias="Status")
    square_footage: Optional[int] = Field(None, alias="SquareFootage", gt=0)
    parking_spaces: int = Field(0, alias="ParkingSpaces", ge=0)
    latitude: float = Field(..., alias="Latitude")
    longitude: float = Field(..., alias="Longitude")
    photos: List[str] = Field(default_factory=list, alias="Photos")
    description: str = Field("", alias="Description")
    year_built: Optional[int] = Field(None, alias="YearBuilt")
    listing_date: date = Field(..., alias="ListingDate")
    agent_name: str = Field(..., alias="AgentName")
    brokerage_name: str = Field(..., alias="BrokerageName")


class ListingsPage(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    listings: List[Listing]
    total: int = Field(..., description="Total listings matching the filters")
    page: int
    total_pages: int = Field(..., alias="totalPages")


class Statistics(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_listings: int = Field(..., alias="totalListings")
    average_price: Optional[int] = Field(None, alias="averagePrice")
    min_price: Optional[int] = Field(None, alias="minPrice")
    max_price: Optional[int] = Field(None, alias="maxPrice")
    cities_count: int = Field(..., alias="citiesCount")
    property_types: List[str] = Field(..., alias="propertyTypes")


class Health(BaseModel):
    status: str
    message: str
    mode: str


class ApiResponse(BaseModel, Generic[T]):
    success: bool = True
    data: T


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    message: str = ""
