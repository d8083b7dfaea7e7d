"""Global configuration management for arc-ai.

Handles user-level configuration stored in ~/.arc-ai/config.yaml.
The only setting today is the default model handed to whichever
provider is selected.
"""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml


class GlobalConfigError(Exception):
    """Raised when there's an error with global configuration."""
    pass


_CONFIG_DIR = Path.home() / ".arc-ai"


def get_global_config_dir() -> Path:
    """Get the global arc-ai configuration directory.

    Returns:
        Path to ~/.arc-ai/
    """
    return _CONFIG_DIR


def ensure_global_config_dir() -> Path:
    """Ensure the global config directory exists.

    Returns:
        Path to ~/.arc-ai/
    """
    config_dir = get_global_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_file_path() -> Path:
    """Get path to config.yaml file."""
    return get_global_config_dir() / "config.yaml"


def load_global_config() -> Dict[str, Any]:
    """Load global configuration from ~/.arc-ai/config.yaml.

    Returns:
        Dictionary with configuration values. Empty dict if file doesn't exist.

    Raises:
        GlobalConfigError: If the file exists but cannot be read or parsed.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(config, dict):
        raise GlobalConfigError(f"Invalid config in {config_file}: expected a mapping")
    return config


def save_global_config(config: Dict[str, Any]) -> None:
    """Save global configuration to ~/.arc-ai/config.yaml.

    Args:
        config: Configuration dictionary to save.
    """
    ensure_global_config_dir()
    config_file = get_config_file_path()

    try:
        with open(config_file, "w") as f:
            yaml.dump(config, f, default_flow_style=False, sort_keys=False)
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to save config to {config_file}: {e}")


def get_default_model() -> Optional[str]:
    """Get the default model from global config.

    Returns:
        Model name string, or None if not configured.
    """
    model = load_global_config().get("model")
    if model is None:
        return None
    model = str(model).strip()
    return model or None


def set_default_model(model: str) -> None:
    """Set the default model in global config."""
    config = load_global_config()
    config["model"] = model
    save_global_config(config)


def clear_default_model() -> bool:
    """Remove the default model from global config.

    Returns:
        True if a model was set and has been removed.
    """
    config = load_global_config()
    if "model" not in config:
        return False
    del config["model"]
    save_global_config(config)
    return True


def resolve_model(cli_model: Optional[str]) -> Optional[str]:
    """Pick the model for this invocation: --model flag, then config.yaml."""
    if cli_model:
        return cli_model
    return get_default_model()
