"""Configuration loader for Slack AWS Cost Notifier."""

from __future__ import annotations

import json
import os
from functools import lru_cache
from pathlib import Path

import boto3
import yaml
from botocore.exceptions import ClientError
from pydantic import ValidationError

from slack_aws_cost_notifier.config.schema import Config
from slack_aws_cost_notifier.errors import ConfigMissingError


def _deep_merge(base: dict, override: dict) -> dict:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _find_config_dir() -> Path:
    """Find the config directory, searching up from current directory."""
    if config_dir := os.environ.get("CONFIG_DIR"):
        return Path(config_dir)

    current = Path.cwd()
    while current != current.parent:
        config_path = current / "config"
        if config_path.is_dir():
            return config_path
        current = current.parent

    return Path("config")


def load_config(
    config_path: str | Path | None = None,
    environment: str | None = None,
) -> Config:
    """
    Load configuration from YAML files.

    Loads config.yaml as base, then merges environment-specific overrides
    (e.g., config.dev.yaml, config.prod.yaml), then environment variables.

    Args:
        config_path: Path to config directory. If None, searches for config/ directory.
        environment: Environment name (dev, staging, prod). If None, uses CONFIG_ENV
                    environment variable or defaults to 'dev'.

    Returns:
        Config: Validated configuration object.

    Raises:
        ConfigMissingError: A value fails validation or type conversion.
    """
    config_dir = Path(config_path) if config_path else _find_config_dir()
    environment = environment or os.environ.get("CONFIG_ENV", "dev")

    config_data: dict = {}

    base_config_path = config_dir / "config.yaml"
    if base_config_path.exists():
        with open(base_config_path) as f:
            config_data = yaml.safe_load(f) or {}

    env_config_path = config_dir / f"config.{environment}.yaml"
    if env_config_path.exists():
        with open(env_config_path) as f:
            env_data = yaml.safe_load(f) or {}
            config_data = _deep_merge(config_data, env_data)

    try:
        config_data = _apply_env_overrides(config_data)
        config_data["environment"] = environment
        return Config(**config_data)
    except (ValidationError, ValueError) as e:
        raise ConfigMissingError(f"Invalid configuration: {e}") from e


def _apply_env_overrides(config_data: dict) -> dict:
    """Apply environment variable overrides to configuration."""
    env_mappings = {
        "AWS_REGION": ("aws", "region"),
        "SLACK_API_TOKEN": ("slack", "token"),
        "SLACK_CHANNEL_ID": ("slack", "channel_id"),
        "SLACK_ENABLED": ("slack", "enabled"),
        "COST_GRANULARITY": ("cost_query", "granularity"),
        "COST_METRIC": ("cost_query", "metric"),
        "COST_WINDOW_POLICY": ("cost_query", "window_policy"),
        "COST_MAX_ATTEMPTS": ("cost_query", "max_attempts"),
    }

    for env_var, path in env_mappings.items():
        if value := os.environ.get(env_var):
            current = config_data
            for key in path[:-1]:
                current = current.setdefault(key, {})

            final_key = path[-1]
            if final_key in ("max_attempts",):
                current[final_key] = int(value)
            elif final_key in ("enabled",):
                current[final_key] = value.lower() in ("true", "1", "yes")
            elif final_key in ("granularity",):
                current[final_key] = value.upper()
            else:
                current[final_key] = value

    return config_data


def load_slack_credentials(
    config: Config,
    secret_name: str | None = None,
    secrets_client: boto3.client | None = None,
) -> Config:
    """
    Fill missing Slack token/channel from a Secrets Manager JSON secret.

    Values already set (from YAML or environment) take precedence. The secret
    is expected to hold ``bot_token`` and ``channel_id`` keys.

    Args:
        config: Loaded configuration.
        secret_name: Secret name. Defaults to the CONFIG_SECRET_NAME env var.
        secrets_client: Optional boto3 Secrets Manager client.

    Returns:
        Config: A copy with Slack credentials filled in where available.
    """
    secret_name = secret_name or os.environ.get("CONFIG_SECRET_NAME")
    if not secret_name or (config.slack.token and config.slack.channel_id):
        return config

    if secrets_client is None:
        secrets_client = boto3.client("secretsmanager", region_name=config.aws.region)

    try:
        response = secrets_client.get_secret_value(SecretId=secret_name)
    except ClientError as e:
        error_code = e.response.get("Error", {}).get("Code", "")
        if error_code == "ResourceNotFoundException":
            raise ConfigMissingError(f"Secret '{secret_name}' not found") from e
        raise ConfigMissingError(f"Error retrieving secret: {e}") from e

    if "SecretString" not in response:
        raise ConfigMissingError(f"Secret '{secret_name}' does not contain a string value")

    try:
        secret_data = json.loads(response["SecretString"])
        token = secret_data.get("bot_token")
        channel_id = secret_data.get("channel_id")
    except (json.JSONDecodeError, AttributeError) as e:
        raise ConfigMissingError(
            f"Secret '{secret_name}' is not a JSON object with bot_token and channel_id"
        ) from e

    slack = config.slack.model_copy(
        update={
            "token": config.slack.token or token or None,
            "channel_id": config.slack.channel_id or channel_id or None,
        }
    )
    return config.model_copy(update={"slack": slack})


def require_slack_settings(config: Config) -> tuple[str, str]:
    """
    Return the Slack token and channel id, failing if either is missing.

    Raises:
        ConfigMissingError: Naming the environment variable to set.
    """
    if not config.slack.token:
        raise ConfigMissingError("SLACK_API_TOKEN env var must be set")
    if not config.slack.channel_id:
        raise ConfigMissingError("SLACK_CHANNEL_ID env var must be set")
    return config.slack.token, config.slack.channel_id


@lru_cache(maxsize=1)
def get_cached_config() -> Config:
    """
    Get cached configuration singleton.

    Useful for Lambda handlers to avoid re-loading config and secrets on
    warm starts.
    """
    return load_slack_credentials(load_config())
