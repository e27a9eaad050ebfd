import json
import os

DEFAULT_CONFIG = {
    "trace_enabled": True,
    "use_jit": False,
    "log_runs": False,
    "banner_width": 60,
    "output_directory": "logs/",
    "log_file_prefix": "utm_runs_",
}

# Expected types for validation
CONFIG_SCHEMA = {
    "trace_enabled": bool,
    "use_jit": bool,
    "log_runs": bool,
    "banner_width": int,
    "output_directory": str,
    "log_file_prefix": str,
}


def validate_config(config):
    for key, expected_type in CONFIG_SCHEMA.items():
        if key not in config:
            raise ValueError(f"Missing required configuration key: {key}")
        # bool is a subclass of int, so reject it explicitly for int keys
        if not isinstance(config[key], expected_type) or (expected_type is int and isinstance(config[key], bool)):
            raise TypeError(f"Config key '{key}' expected {expected_type}, got {type(config[key])}.")

    unknown = set(config) - set(CONFIG_SCHEMA)
    if unknown:
        raise ValueError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

    if config["banner_width"] <= 0:
        raise ValueError("banner_width must be positive.")
    if not config["log_file_prefix"]:
        raise ValueError("log_file_prefix must not be empty.")


def default_config():
    config = DEFAULT_CONFIG.copy()
    validate_config(config)
    return config


def load_config(path="config/runtime_config.json"):
    if not os.path.exists(path):
        raise FileNotFoundError(f"Configuration file not found at: {path}")

    with open(path, "r", encoding="utf-8") as f:
        user_config = json.load(f)

    if not isinstance(user_config, dict):
        raise TypeError(f"Configuration file {path} must contain a JSON object.")

    # Merge defaults with overrides
    config = DEFAULT_CONFIG.copy()
    config.update(user_config)

    # Validate schema
    validate_config(config)

    return config
