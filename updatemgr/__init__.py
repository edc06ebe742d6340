"""Channel index manager for a versioned distribution directory."""

__version__ = "0.1.0"
