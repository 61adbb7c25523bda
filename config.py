import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

@dataclass
class Settings:
    # Application settings
    app_name: str = os.getenv("APP_NAME", "Library Lending")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")

    # Logging settings
    log_level: str = os.getenv("LOG_LEVEL", "WARNING").upper()
    log_format: str = os.getenv("LOG_FORMAT", "%(levelname)s %(name)s: %(message)s")

    # CLI settings
    cli_output: str = os.getenv("LIB_CLI_OUTPUT", "plain").lower()
    default_search_policy: str = os.getenv("DEFAULT_SEARCH_POLICY", "title").lower()

    # Validation settings
    min_publication_year: int = int(os.getenv("MIN_PUBLICATION_YEAR", "0"))


settings = Settings()
