from app.repositories.geo.location import LocationRepository

__all__ = ["LocationRepository"]
