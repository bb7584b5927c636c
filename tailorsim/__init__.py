"""Settings, meshes, geodesic distances, OBJ export and helpers for cloth simulation."""

__version__ = "1.9.0"

__all__ = [
    "callback",
    "config",
    "errors",
    "filesystem",
    "geodesic",
    "helper",
    "logger",
    "mesh",
    "objio",
    "seeds",
    "state",
    "timer",
]