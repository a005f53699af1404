"""Everyday developer utilities: hashing, number bases, gzip, HTML escaping,
JSON/YAML/markup formatting, lorem ipsum, desktop entries and image conversion."""

__version__ = "0.1.0"