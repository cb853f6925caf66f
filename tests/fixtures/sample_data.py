"""Reusable fixtures for ddf_api tests."""

import json


def sample_listing(key="T1001", price=500000, city="Toronto", status="Active", **kwargs):
    """Create a DDF-shaped listing dict with sensible defaults."""
    data = {
        "ListingKey": key,
        "ListPrice": price,
        "StreetAddress": f"{key[-3:]} Queen Street West",
        "City": city,
        "Province": "Ontario",
        "PostalCode": "M5V 2A1",
        "BedroomsTotal": 2,
        "BathroomTotal": 2.0,
        "PropertySubType": "Condo",
        "Status": status,
        "SquareFootage": 900,
        "ParkingSpaces": 1,
        "Latitude": 43.6487,
        "Longitude": -79.3972,
        "Photos": [f"https://example.com/{key}/1.jpg"],
        "Description": "Sample listing",
        "YearBuilt": 2010,
        "ListingDate": "2024-09-01",
        "AgentName": "Sam Agent",
        "BrokerageName": "Sample Realty",
    }
    data.update(kwargs)
    return data


def sample_listings():
    """Seven listings across three cities, subtypes and statuses."""
    return [
        sample_listing("T1001", 500000, "Toronto"),
        sample_listing("T1002", 700000, "Toronto", status="Sold"),
        sample_listing("T1003", 900000, "Toronto"),
        sample_listing("M2001", 1450000, "Mississauga", BedroomsTotal=4, BathroomTotal=3.5,
                       PropertySubType="Detached"),
        sample_listing("M2002", 849900, "Mississauga", BedroomsTotal=3, BathroomTotal=2.5,
                       PropertySubType="Townhouse"),
        sample_listing("N3001", 849900, "North York", BedroomsTotal=3, BathroomTotal=2.5,
                       PropertySubType="Townhouse"),
        sample_listing("N3002", 1100000, "North York", status="Pending", BedroomsTotal=4,
                       PropertySubType="Semi-Detached"),
    ]


def write_fixture(path, listings):
    path.write_text(json.dumps({"listings": listings}), encoding="utf-8")
    return path


