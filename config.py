from pydantic import field_validator
from pydantic_settings import BaseSettings

EXPORT_FORMATS = ("markdown", "text", "json", "csv", "plain")

class AppConfig(BaseSettings):
    compliance_marker: str = "Compliance Note:"
    export_dir: str = "artifacts"
    export_format: str = "markdown"
    log_dir: str = "logs"
    log_level: str = "ERROR"

    @field_validator("export_format")
    @classmethod
    def check_export_format(cls, value: str) -> str:
        value = value.lower()
        if value not in EXPORT_FORMATS:
            raise ValueError(f"Unsupported export format: {value}. Must be one of {EXPORT_FORMATS}")
        return value

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unsupported log level: {value}")
        return value

    class Config:
        env_file = ".env"
        extra = "ignore"

def get_config() -> AppConfig:
    return AppConfig()

config = get_config()
