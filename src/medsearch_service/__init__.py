"""MedSearch Service: medical content search, ranking and recommendations."""

__version__ = "0.1.0"
