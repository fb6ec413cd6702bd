from .weather import WeatherService, fetch_weather

__all__ = ["WeatherService", "fetch_weather"]
