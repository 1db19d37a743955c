"""SEO schema service: schema.org JSON-LD generation and validation."""

__version__ = "1.0.0"
