"""Configuration management for scd-access."""
import os
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv

from .exceptions import ConfigurationError

OSCP_ACCEPT_HEADER = "application/vnd.oscp+json; version=1.0"


@dataclass
class Config:
    """scd-access configuration.

    Attributes:
        service_url: Base URL of the spatial content discovery service
        topic: Default topic (content category) for requests
        token: Bearer token used when no token provider supplies one
        local: Return canned local records instead of contacting the server
        request_timeout: Timeout in seconds for HTTP calls (None waits forever)
        accept_header: Value of the Accept header sent with every request
        min_id_length: Minimum length of a record id used as a lookup key
    """

    # Service
    service_url: Optional[str] = None
    topic: Optional[str] = None

    # Authorization
    token: Optional[str] = None

    # Debugging: when True, no server access is done
    local: bool = False

    # Transport
    request_timeout: Optional[float] = None
    accept_header: str = OSCP_ACCEPT_HEADER

    # Record ids
    min_id_length: int = 16

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "Config":
        """Load configuration from environment variables.

        Args:
            env_file: Path to .env file (optional)

        Returns:
            Config instance with values from environment

        Raises:
            ConfigurationError: If a numeric variable cannot be parsed
        """
        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv()

        timeout = os.getenv("SCD_REQUEST_TIMEOUT")
        try:
            request_timeout = float(timeout) if timeout else None
        except ValueError:
            raise ConfigurationError(f"SCD_REQUEST_TIMEOUT must be a number, got {timeout!r}")

        return cls(
            service_url=os.getenv("SCD_SERVICE_URL"),
            topic=os.getenv("SCD_TOPIC"),
            token=os.getenv("SCD_TOKEN"),
            local=os.getenv("SCD_LOCAL", "false").lower() == "true",
            request_timeout=request_timeout,
        )

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Load configuration from dictionary.

        Args:
            config_dict: Dictionary with configuration values

        Returns:
            Config instance
        """
        return cls(**{k: v for k, v in config_dict.items() if k in cls.__annotations__})
