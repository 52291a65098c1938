"""Settings package for environment-driven configuration."""

from faceted_search.settings.app import SearchSettings, get_settings


__all__ = ["SearchSettings", "get_settings"]
