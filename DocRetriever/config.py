import copy
import json
import logging
import os

logger = logging.getLogger(__name__)

CONFIG_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "config.json")

DEFAULT_CONFIG = {
    "ranking": {
        "primary_weight": 0.6,
        "secondary_weight": 0.4
    },
    "engine": {
        "thread_safe": False
    },
    "logging": {
        "level": "WARNING"
    }
}


def _merge(base, overrides):
    """Recursively merge overrides into a copy of base"""
    merged = copy.deepcopy(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _validate(config):
    ranking = config["ranking"]
    for key in ("primary_weight", "secondary_weight"):
        weight = ranking.get(key)
        if isinstance(weight, bool) or not isinstance(weight, (int, float)):
            raise ValueError(f"ranking.{key} must be a number, got {weight!r}")
        ranking[key] = float(weight)
    config["engine"]["thread_safe"] = bool(config["engine"].get("thread_safe", False))
    return config


def load_config(config_path=None):
    """
    Load configuration from a JSON file, merged over the default settings.

    Args:
        config_path: Path to a JSON config file (defaults to the packaged config.json)

    Returns:
        dict: Configuration dictionary

    Raises:
        ValueError: If a ranking weight is not a number
    """
    config_path = config_path or CONFIG_PATH
    overrides = {}

    if os.path.exists(config_path):
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                overrides = json.load(f)
            logger.debug("Loaded configuration from %s", config_path)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Could not load config %s: %s, using default settings", config_path, e)
    else:
        logger.warning("No config found at %s, using default settings", config_path)

    return _validate(_merge(DEFAULT_CONFIG, overrides))


def ranking_weights(config):
    ranking = config.get("ranking", {})
    return (
        float(ranking.get("primary_weight", DEFAULT_CONFIG["ranking"]["primary_weight"])),
        float(ranking.get("secondary_weight", DEFAULT_CONFIG["ranking"]["secondary_weight"])),
    )
