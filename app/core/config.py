import os

class Settings:
    # Feeds
    FEED_BASE_URL: str = os.getenv("FEED_BASE_URL", "https://tum-dev.github.io/eat-api")
    DEFAULT_LOCATION: str = os.getenv("DEFAULT_LOCATION", "mensa-arcisstr")
    REQUEST_TIMEOUT: int = int(os.getenv("REQUEST_TIMEOUT", "10"))
    USER_AGENT: str = os.getenv("USER_AGENT", "mensa-menu/1.0 (+https://github.com/TUM-Dev/eat-api)")

    # Rendering
    LINE_WIDTH: int = int(os.getenv("LINE_WIDTH", "80"))
    COLOR_OUTPUT: bool = os.getenv("COLOR_OUTPUT", "1").lower() in ("1", "true", "yes")
    TIMEZONE: str = os.getenv("TIMEZONE", "Europe/Berlin")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

settings = Settings()
