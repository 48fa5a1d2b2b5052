"""Geo API views - thin layer over services with edge cache headers."""

from collections.abc import Awaitable

from fastapi import APIRouter, Depends, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from loguru import logger

from app.services.geo import GeoService, categorize_location
from web.api.deps import get_geo_service
from web.api.errors import NotFoundError, validate_county, validate_days

from .schemas import CurrentLocation, CurrentLocationResponse, RegisterRequest, TrackRequest

router = APIRouter(prefix="/api/geo", tags=["geo"])

NO_STORE = {"Cache-Control": "no-store"}
NO_CACHE = {
    "Cache-Control": "private, no-cache, no-store, must-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}


def _public(cache_control: str, cdn_max_age: int) -> dict[str, str]:
    return {
        "Cache-Control": cache_control,
        "CDN-Cache-Control": f"max-age={cdn_max_age}",
        "Vary": "Accept-Encoding",
    }


STATS_HEADERS = _public("public, max-age=60, s-maxage=120, stale-while-revalidate=300", 120)
TODAY_HEADERS = _public("public, max-age=300, s-maxage=600", 600)
COUNTY_HEADERS = _public("public, max-age=300, s-maxage=600, stale-while-revalidate=1800", 600)
TRENDS_HEADERS = _public("public, max-age=600, s-maxage=1800, stale-while-revalidate=3600", 1800)


def json_response(content, headers: dict[str, str], status_code: int = 200) -> JSONResponse:
    return JSONResponse(jsonable_encoder(content), status_code=status_code, headers=headers)


async def respond(call: Awaitable[dict], headers: dict[str, str], error: str) -> JSONResponse:
    """Await a service call; unexpected exceptions become a 500 with `error`."""
    try:
        result = await call
    except Exception as e:
        logger.error("{}: {}", error, e)
        return json_response({"success": False, "error": error}, headers, 500)
    return json_response(result, headers)


@router.get("/current", response_model=CurrentLocationResponse)
def current_location(request: Request):
    """Location of the caller from Cloudflare geo headers."""
    try:
        loc = categorize_location(
            request.headers.get("cf-ipcity"),
            request.headers.get("cf-region"),
            request.headers.get("cf-ipcountry"),
        )
        location = CurrentLocation(county=loc.county, town=loc.town, category=loc.category)
    except Exception as e:
        logger.error("Failed to get current location: {}", e)
        return json_response(
            {"success": False, "error": "Failed to get current location", "location": CurrentLocation().model_dump()},
            NO_CACHE,
            500,
        )
    return json_response(CurrentLocationResponse(success=True, location=location).model_dump(), NO_CACHE)


@router.post("/register")
async def register_device(body: RegisterRequest | None = None, geo: GeoService = Depends(get_geo_service)):
    if body is None or not body.device_id:
        return json_response({"success": False, "error": "Device ID required"}, NO_STORE, 400)
    return await respond(
        geo.register_device(body.device_id, body.county, body.town, body.category),
        NO_STORE,
        "Failed to register device",
    )


@router.post("/track")
async def track_location(body: TrackRequest, geo: GeoService = Depends(get_geo_service)):
    return await respond(geo.track_location(body.county, body.town, body.category), NO_STORE, "Failed to track location")


@router.get("/stats")
async def get_stats(geo: GeoService = Depends(get_geo_service)):
    return await respond(geo.get_geo_stats(), STATS_HEADERS, "Failed to get geo stats")


@router.get("/today")
async def get_today(geo: GeoService = Depends(get_geo_service)):
    return await respond(geo.get_todays_stats(), TODAY_HEADERS, "Failed to get today stats")


@router.get("/county/{county}")
async def get_county(county: str, geo: GeoService = Depends(get_geo_service)):
    county = validate_county(county)
    try:
        details = await geo.get_county_details(county)
    except Exception as e:
        logger.error("Failed to get county details: {}", e)
        return json_response({"success": False, "error": "Failed to get county details"}, COUNTY_HEADERS, 500)

    if details.get("success") and not details["towns"]:
        raise NotFoundError(f"No data for county: {county}")
    return json_response(details, COUNTY_HEADERS)


@router.get("/trends")
async def get_trends(days: int = 7, geo: GeoService = Depends(get_geo_service)):
    validate_days(days)
    return await respond(geo.get_geo_trends(days), TRENDS_HEADERS, "Failed to get geo trends")


@router.post("/cleanup")
async def cleanup(geo: GeoService = Depends(get_geo_service)):
    return await respond(geo.cleanup_old_devices(), NO_STORE, "Failed to cleanup devices")


@router.post("/archive")
async def archive(geo: GeoService = Depends(get_geo_service)):
    return await respond(geo.archive_daily_stats(), NO_STORE, "Failed to archive stats")


@router.post("/reset-daily")
async def reset_daily(geo: GeoService = Depends(get_geo_service)):
    return await respond(geo.reset_daily_counts(), NO_STORE, "Failed to reset daily counts")
