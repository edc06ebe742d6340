"""Version registry: scanning, semver precedence and read-only exports."""

from .model import ReleasedComponent, VersionEntry
from .scan import Registry, load_registry
from .semver import SemVer, parse_version

__all__ = [
    "Registry",
    "ReleasedComponent",
    "SemVer",
    "VersionEntry",
    "load_registry",
    "parse_version",
]
