"""Visitor location categorization from edge geo headers."""

from app.models.geo import GeoCategory, Location
from app.models.geo.regions import AFRICA, EAST_AFRICA, GLOBAL, KENYA_COUNTIES

_TOWN_TO_COUNTY = {
    town.upper(): county for county, towns in reversed(KENYA_COUNTIES.items()) for town in towns
}


def match_county(place: str | None) -> str | None:
    """Kenyan county owning a town name, if any."""
    if not place:
        return None
    return _TOWN_TO_COUNTY.get(place.strip().upper())


def _mentions(places: list[str], *values: str) -> bool:
    return any(p.upper() in v for p in places for v in values if v)


def categorize_location(city: str | None, region: str | None, country: str | None) -> Location:
    """Map (city, region, country) to a county/town/category bucket."""
    county = match_county(city)
    if county:
        return Location(county=county, town=city, category=GeoCategory.KENYA.value)

    county = match_county(region)
    if county:
        return Location(county=county, town=city or region, category=GeoCategory.KENYA.value)

    town = city or region or country
    upper = [v.upper() for v in (city, region, country) if v]

    if country and country.upper() in ("KE", "KENYA"):
        return Location(county="KENYA", town=city or region or "Kenya", category=GeoCategory.KENYA.value)

    for category, places in (
        (GeoCategory.EAST_AFRICA, EAST_AFRICA),
        (GeoCategory.AFRICA, AFRICA),
        (GeoCategory.GLOBAL, GLOBAL),
    ):
        if _mentions(places, *upper):
            return Location(county=category.value, town=town, category=category.value)

    return Location(county=GeoCategory.GLOBAL.value, town=town or "Unknown", category=GeoCategory.GLOBAL.value)
