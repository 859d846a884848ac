"""Runtime services: settings and telemetry."""

from .config import EngineSettings, get_settings, load_settings, override_settings

__all__ = ["EngineSettings", "get_settings", "load_settings", "override_settings"]
