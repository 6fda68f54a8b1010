"""
Composition root of the rainwater savings service.

Loads settings, builds the dependency container that wires the Open-Meteo
gateway, cache and calculator together, and exposes the ASGI app.
"""

from .config import AppSettings, get_settings
from .container import AppContainer, get_container, init_container

__all__ = [
    "AppSettings",
    "get_settings",
    "AppContainer",
    "init_container",
    "get_container",
]
