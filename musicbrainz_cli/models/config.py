"""
Pydantic model for client configuration.
Provides robust validation for all settings.
"""

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_BASE_URL = "https://musicbrainz.org/ws/2"
DEFAULT_USER_AGENT = "MusicBrainzCli/0.1.0 (https://github.com/musicbrainz-cli)"


class ClientConfig(BaseModel):
    """A validated configuration model for the catalog client."""

    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT

    # Transport
    timeout: float = 30.0

    # Request gate and retry policy
    rate_limit_interval: float = 1.0
    max_retries: int = 3
    initial_backoff: float = 1.0

    model_config = ConfigDict(validate_assignment=True, str_strip_whitespace=True)

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Requires an absolute http(s) URL and drops trailing slashes."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Base URL must start with http:// or https://.")
        return v.rstrip("/")

    @field_validator("user_agent")
    @classmethod
    def validate_user_agent(cls, v: str) -> str:
        """MusicBrainz rejects anonymous traffic, so the User-Agent is mandatory."""
        if not v:
            raise ValueError("User-Agent cannot be empty.")
        return v

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("Timeout must be greater than zero.")
        return v

    @field_validator("rate_limit_interval", "initial_backoff")
    @classmethod
    def validate_non_negative_seconds(cls, v: float) -> float:
        if v < 0:
            raise ValueError("Durations cannot be negative.")
        return v

    @field_validator("max_retries")
    @classmethod
    def validate_max_retries(cls, v: int) -> int:
        if v < 0 or v > 10:
            raise ValueError("Max retries must be between 0 and 10.")
        return v

    @classmethod
    def get_ini_keys(cls) -> set[str]:
        """Returns a set of all keys that are expected in the INI file."""
        return set(cls.model_fields)
