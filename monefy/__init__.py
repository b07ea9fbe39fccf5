"""Personal expense tracker: data models, SQLite store, HTTP server and console client."""

__version__ = "0.1.0"