"""CLI configuration management."""

import json
import logging
import os
from pathlib import Path
from typing import Dict, Any

from ccloud_client.clients.confluent_client import ConfluentClient
from ccloud_client.config import DEFAULT_BASE_URL, ClientConfig, config
from ccloud_client.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / '.ccloud-client' / 'config.json'

SECRET_KEYS = ('api_secret', 'kafka_api_secret')


def read_cli_config_file(config_path: Path) -> Dict[str, Any]:
    """Read the values stored in the configuration file, empty if unreadable."""

    if not config_path.exists():
        return {}

    try:
        with open(config_path, 'r') as f:
            file_config = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to load config from {config_path}: {e}")
        return {}

    if not isinstance(file_config, dict):
        logger.warning(f"Ignoring config in {config_path}: expected a JSON object")
        return {}
    return file_config


def load_cli_config(config_path: Path) -> Dict[str, Any]:
    """Load CLI configuration from file, falling back to the environment."""

    default_config = {
        'base_url': config.client.base_url,
        'api_key': config.client.api_key,
        'api_secret': config.client.api_secret,
        'kafka_api_key': config.client.kafka_api_key,
        'kafka_api_secret': config.client.kafka_api_secret,
        'timeout': config.client.timeout
    }

    # File values win over the environment, unset file values do not
    merged_config = default_config.copy()
    merged_config.update({k: v for k, v in read_cli_config_file(config_path).items() if v is not None})

    return merged_config


def save_cli_config(config_path: Path, cli_config: Dict[str, Any]) -> None:
    """Save CLI configuration to a file readable only by its owner."""

    config_path.parent.mkdir(parents=True, exist_ok=True)

    try:
        fd = os.open(config_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, 'w') as f:
            json.dump(cli_config, f, indent=2)
        # An existing file keeps its old mode on open
        config_path.chmod(0o600)
    except OSError as e:
        raise ConfigurationError(f"Failed to save config to {config_path}: {e}")


def update_cli_config(config_path: Path, updates: Dict[str, Any]) -> Dict[str, Any]:
    """Merge ``updates`` into the stored configuration and save it."""

    stored_config = read_cli_config_file(config_path)
    stored_config.update(updates)
    save_cli_config(config_path, stored_config)
    return stored_config


def build_client_config(ctx_config: Dict[str, Any]) -> ClientConfig:
    """Build a validated client configuration from the CLI context."""

    client_config = ClientConfig(
        base_url=ctx_config.get('base_url') or DEFAULT_BASE_URL,
        api_key=ctx_config.get('api_key'),
        api_secret=ctx_config.get('api_secret'),
        kafka_api_key=ctx_config.get('kafka_api_key'),
        kafka_api_secret=ctx_config.get('kafka_api_secret'),
        timeout=ctx_config.get('timeout')
    )
    client_config.validate()
    return client_config


def mask_secrets(cli_config: Dict[str, Any]) -> Dict[str, Any]:
    """Copy of the configuration safe to print."""
    return {
        k: ('****' if k in SECRET_KEYS and v else v)
        for k, v in cli_config.items()
    }


def get_client(ctx_obj: Dict[str, Any]) -> ConfluentClient:
    """Get the client stored in the CLI context, creating it on first use."""
    if ctx_obj.get('client') is None:
        ctx_obj['client'] = ConfluentClient(build_client_config(ctx_obj['config']))
    return ctx_obj['client']
