"""Runtime configuration loaded from environment variables.

Every field can be overridden with a ``MENSAR_``-prefixed environment variable
or a .env file in the working directory (e.g. ``MENSAR_LOG_LEVEL=DEBUG``).
"""

from pathlib import Path

from platformdirs import user_data_dir
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings

from mensar.errors import ConfigError

APP_NAME = "mensar"


class MensarConfig(BaseSettings):
    """Configuration for the catalog client, defaults store and logging."""

    # Cookpit catalog service (public, no authentication)
    base_url: str = Field(
        default="https://idapps.ethz.ch/cookpit-pub-services/v1",
        description="Base URL of the cookpit publication service",
    )
    client_id: str = Field(
        default="ethz-wcms",
        description="Value of the client-id query parameter",
    )
    page_size: int = Field(
        default=50,
        description="Result set size requested per call (rs-size)",
    )
    request_timeout: float | None = Field(
        default=30.0,
        description="Seconds to wait for the service before giving up",
    )

    # Paths
    data_dir: Path | None = Field(
        default=None,
        description="Directory holding defaults.json (platform data dir if unset)",
    )

    # Logging
    log_json: bool = Field(
        default=False,
        description="Output logs in JSON format",
    )
    log_level: str = Field(
        default="WARNING",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    model_config = {
        "env_prefix": "MENSAR_",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @property
    def defaults_path(self) -> Path:
        """Location of the persisted defaults file."""
        directory = self.data_dir or Path(user_data_dir(APP_NAME))
        return directory / "defaults.json"


# Singleton pattern
_config: MensarConfig | None = None


def get_config() -> MensarConfig:
    """Get the configuration singleton.

    Returns:
        MensarConfig: Configuration instance

    Raises:
        ConfigError: If an environment setting cannot be parsed.
    """
    global _config
    if _config is None:
        try:
            _config = MensarConfig()
        except ValidationError as e:
            fields = ", ".join(
                "MENSAR_" + str(err["loc"][0]).upper() for err in e.errors() if err["loc"]
            )
            raise ConfigError(f"invalid configuration: {fields or e.error_count()}") from e
    return _config
