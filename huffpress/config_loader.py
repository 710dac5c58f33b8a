# config_loader.py
import copy
import logging
import os

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "HUFFPRESS_CONFIG"
DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "default_config.yaml")


def _merge(base, override):
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _read_yaml(path):
    with open(path, "r") as f:
        config = yaml.safe_load(f)
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    return config


def load_config(config_path=None):
    """
    Loads the packaged defaults and overlays a user config file on top.

    Parameters:
    config_path (str, optional): YAML file to overlay. When omitted the
    HUFFPRESS_CONFIG environment variable (which may come from a .env file)
    is consulted.

    Returns:
    dict: The merged configuration.
    """
    load_dotenv()
    config = _read_yaml(DEFAULT_CONFIG_PATH)
    config_path = config_path or os.environ.get(CONFIG_ENV_VAR)
    if config_path:
        logger.debug("Loading config overrides from %s", config_path)
        config = _merge(config, _read_yaml(config_path))
    return config
