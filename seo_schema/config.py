"""
Configuration management for the SEO schema service.
Handles environment variables and application settings.
"""
import os
from typing import Dict, Optional
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Application configuration loaded from environment variables."""

    # Server settings
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = os.getenv("LOG_FORMAT", "json")  # json or console

    # Request settings
    REQUEST_TIMEOUT: int = int(os.getenv("REQUEST_TIMEOUT", "30"))

    # Entity source: "memory" (fixtures file) or "wordpress" (REST API)
    ENTITY_SOURCE: str = os.getenv("ENTITY_SOURCE", "memory")
    ENTITY_FIXTURES_PATH: Optional[str] = os.getenv("ENTITY_FIXTURES_PATH")

    # WordPress REST API (optional)
    # Credentials are loaded from environment variables, NEVER hardcoded
    WP_SITE_URL: Optional[str] = os.getenv("WP_SITE_URL")
    WP_ACCESS_TOKEN: Optional[str] = os.getenv("WP_ACCESS_TOKEN")
    # post_type:SchemaType pairs, e.g. "product:Product,service:Service"
    WP_SCHEMA_TYPE_MAP: str = os.getenv("WP_SCHEMA_TYPE_MAP", "")

    # Output
    PRETTY_JSON: bool = os.getenv("PRETTY_JSON", "false").lower() == "true"

    @classmethod
    def is_wordpress_configured(cls) -> bool:
        """Check if a WordPress site URL is configured."""
        return bool(cls.WP_SITE_URL)

    @classmethod
    def schema_type_map(cls) -> Dict[str, str]:
        """
        Parse WP_SCHEMA_TYPE_MAP into a post type -> schema type mapping.

        Malformed pairs (no colon, empty side) are ignored.
        """
        mapping = {}
        for pair in cls.WP_SCHEMA_TYPE_MAP.split(","):
            post_type, _, schema_type = pair.partition(":")
            post_type, schema_type = post_type.strip(), schema_type.strip()
            if post_type and schema_type:
                mapping[post_type] = schema_type
        return mapping


config = Config()
