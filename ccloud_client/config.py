"""Configuration management for the Confluent Cloud client."""

import os
from typing import Optional
from dataclasses import dataclass, field

from ccloud_client.exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://api.confluent.cloud"


@dataclass
class ClientConfig:
    """HTTP client configuration."""
    base_url: str = DEFAULT_BASE_URL
    api_key: Optional[str] = None
    api_secret: Optional[str] = None
    # Cluster-scoped credentials for data-plane (REST v3) calls
    kafka_api_key: Optional[str] = None
    kafka_api_secret: Optional[str] = None
    timeout: Optional[float] = None
    user_agent: str = "ccloud-client-python/0.1.0"

    def validate(self) -> None:
        """Ensure the control-plane credentials are usable."""
        if not self.base_url:
            raise ConfigurationError("Base URL must not be empty", config_key="base_url")
        if not self.api_key:
            raise ConfigurationError("Cloud API key is not configured", config_key="api_key")
        if not self.api_secret:
            raise ConfigurationError("Cloud API secret is not configured", config_key="api_secret")
        if bool(self.kafka_api_key) != bool(self.kafka_api_secret):
            raise ConfigurationError(
                "Kafka API key and secret must be configured together",
                config_key="kafka_api_key"
            )

    @property
    def credentials(self):
        """Basic auth tuple for control-plane calls."""
        return (self.api_key or "", self.api_secret or "")

    @property
    def kafka_credentials(self):
        """Basic auth tuple for data-plane calls, falling back to the cloud key."""
        if self.kafka_api_key and self.kafka_api_secret:
            return (self.kafka_api_key, self.kafka_api_secret)
        return self.credentials


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file_path: Optional[str] = None
    max_file_size: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5


@dataclass
class Config:
    """Main configuration class."""
    client: ClientConfig = field(default_factory=ClientConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> 'Config':
        """Load configuration from environment variables."""
        config = cls()

        # Client config
        config.client.base_url = os.getenv('CCLOUD_BASE_URL', config.client.base_url)
        config.client.api_key = os.getenv('CONFLUENT_CLOUD_API_KEY')
        config.client.api_secret = os.getenv('CONFLUENT_CLOUD_API_SECRET')
        config.client.kafka_api_key = os.getenv('CCLOUD_KAFKA_API_KEY')
        config.client.kafka_api_secret = os.getenv('CCLOUD_KAFKA_API_SECRET')

        timeout = os.getenv('CCLOUD_TIMEOUT')
        if timeout:
            try:
                config.client.timeout = float(timeout)
            except ValueError:
                raise ConfigurationError(
                    f"CCLOUD_TIMEOUT must be a number, got '{timeout}'",
                    config_key="timeout"
                )

        # Logging config
        config.logging.level = os.getenv('LOG_LEVEL', config.logging.level)
        config.logging.file_path = os.getenv('LOG_FILE_PATH')

        return config


# Global configuration instance
config = Config.from_env()
