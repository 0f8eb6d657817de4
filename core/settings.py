from pathlib import Path

from pydantic_settings import BaseSettings

BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    # Templates
    TEMPLATES_DIR: Path = BASE_DIR / "templates"
    FIELD_TEMPLATE_NAMESPACE: str = "fields"
    TEMPLATE_EXTENSION: str = ".html"

    # Generic partial family used when a field type ships no template for a page
    FALLBACK_FIELD_TYPE: str = "key"

    # Module scanned for concrete field types
    FIELD_TYPES_MODULE: str = "fields.types"

    LOG_LEVEL: str = "INFO"
    JSON_LOGS: bool = False

    DEBUG: bool = False

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
