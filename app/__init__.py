"""Topic-to-ideas service backed by the Vertex AI prediction API."""

__version__ = "0.1.0"
