"""Client for version 4 of the Wrike REST API: configuration, HTTP transport and API methods."""

__version__ = "0.1.0"