"""
Configuration settings for the Job Posting Extractor.
Loads values from .env file and provides typed access.
"""

import os
from dataclasses import dataclass, field
from dotenv import load_dotenv

# Determine project root
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
env_path = os.path.join(project_root, ".env")
load_dotenv(env_path)


DEFAULT_STRATEGY_ORDER = "browser,fetch,mobile_api,structured_data,alternative"


def _split_csv(value: str) -> list[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    # HTTP strategies
    request_timeout: int = field(
        default_factory=lambda: int(os.getenv("REQUEST_TIMEOUT", "15"))
    )

    # Browser strategy
    navigation_timeout_ms: int = field(
        default_factory=lambda: int(os.getenv("NAVIGATION_TIMEOUT_MS", "30000"))
    )
    content_wait_timeout_ms: int = field(
        default_factory=lambda: int(os.getenv("CONTENT_WAIT_TIMEOUT_MS", "10000"))
    )
    max_navigation_attempts: int = field(
        default_factory=lambda: int(os.getenv("MAX_NAVIGATION_ATTEMPTS", "5"))
    )
    min_content_length: int = field(
        default_factory=lambda: int(os.getenv("MIN_CONTENT_LENGTH", "1000"))
    )
    nav_delay_min_ms: int = field(
        default_factory=lambda: int(os.getenv("NAV_DELAY_MIN_MS", "1000"))
    )
    nav_delay_max_ms: int = field(
        default_factory=lambda: int(os.getenv("NAV_DELAY_MAX_MS", "3000"))
    )
    browser_headless: bool = field(
        default_factory=lambda: os.getenv("BROWSER_HEADLESS", "true").lower() == "true"
    )

    # Strategy chain (order matters)
    extraction_strategies: list[str] = field(
        default_factory=lambda: _split_csv(
            os.getenv("EXTRACTION_STRATEGIES", DEFAULT_STRATEGY_ORDER)
        )
    )

    # Paths
    db_path: str = field(
        default_factory=lambda: os.getenv(
            "DB_PATH", os.path.join(project_root, "data", "applications.db")
        )
    )
    output_dir: str = field(
        default_factory=lambda: os.getenv("OUTPUT_DIR", "output")
    )

    # Email notifications
    smtp_host: str = field(
        default_factory=lambda: os.getenv("SMTP_HOST", "smtp.gmail.com")
    )
    smtp_port: int = field(
        default_factory=lambda: int(os.getenv("SMTP_PORT", "587"))
    )
    smtp_user: str = field(
        default_factory=lambda: os.getenv("SMTP_USER", "")
    )
    smtp_password: str = field(
        default_factory=lambda: os.getenv("SMTP_PASSWORD", "")
    )
    notify_email: str = field(
        default_factory=lambda: os.getenv("NOTIFY_EMAIL", "")
    )


# Singleton instance
settings = Settings()
