from pydantic import Field, validator
from pydantic_settings import BaseSettings
from functools import lru_cache


class GeneralSettings(BaseSettings):
    """General configuration"""

    ENVIRONMENT: str = Field(
        default="development",
        description="Environment: development, staging, production"
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL"
    )

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


class ChatAPISettings(BaseSettings):
    """Chat platform REST API configuration"""

    CHAT_API_BASE_URL: str = Field(
        default="https://slack.com/api/",
        description="Base URL of the API; method names are appended to it"
    )
    CHAT_API_TOKEN: str = Field(
        default="",
        description="Service token sent as the 'token' field of every call"
    )
    CHAT_API_TIMEOUT: float = Field(
        default=30.0,
        description="Timeout in seconds for each HTTP request"
    )
    CHAT_API_UPLOAD_CHUNK_SIZE: int = Field(
        default=32 * 1024,
        description="Bytes read from an upload stream per chunk"
    )
    CHAT_API_PIPE_MAX_CHUNKS: int = Field(
        default=4,
        description="Chunks buffered in the upload pipe before the encoder blocks"
    )
    CHAT_API_TRACE: bool = Field(
        default=False,
        description="Log request/response dumps and timings at DEBUG"
    )

    @validator("CHAT_API_BASE_URL")
    def validate_base_url(cls, v):
        """Method names are appended directly, so keep exactly one trailing slash"""
        return v.rstrip("/") + "/"

    @validator("CHAT_API_UPLOAD_CHUNK_SIZE", "CHAT_API_PIPE_MAX_CHUNKS")
    def validate_positive(cls, v):
        if v < 1:
            raise ValueError("must be >= 1")
        return v

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


class LoggingSettings(BaseSettings):
    """Logging configuration"""

    LOG_FILE: str = Field(
        default="",
        description="Log file path; empty logs to the console only"
    )
    LOG_RETENTION_DAYS: int = Field(
        default=1,
        description="Rotated log files to keep (one per day)"
    )

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


class Settings(BaseSettings):
    """
    Groups every configuration section
    Usage: from config.settings import get_settings
           settings = get_settings()
           settings.chat_api.CHAT_API_BASE_URL
    """

    # Subconfigurations
    general: GeneralSettings = GeneralSettings()
    chat_api: ChatAPISettings = ChatAPISettings()
    logging: LoggingSettings = LoggingSettings()

    # Shortcuts
    @property
    def ENVIRONMENT(self) -> str:
        return self.general.ENVIRONMENT

    @property
    def LOG_LEVEL(self) -> str:
        return self.general.LOG_LEVEL

    @property
    def CHAT_API_BASE_URL(self) -> str:
        return self.chat_api.CHAT_API_BASE_URL

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """
    Cached Settings instance, read from the environment and .env once
    """
    return Settings()
