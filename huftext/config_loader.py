# config_loader.py
import codecs
import copy
import os

import yaml
from dotenv import find_dotenv, load_dotenv

from .errors import ResourceError
from .huffman import SINGLE_SYMBOL_POLICIES

CONFIG_ENV_VAR = "HUFTEXT_CONFIG"

DEFAULT_CONFIG = {
    "text": {"encoding": "utf-8"},
    "huffman": {"single_symbol": "bit"},
    "output": {"atomic": True},
    "logging": {"level": "WARNING"},
}


def _merge(base, override):
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


def load_config(config_path=None):
    """
    Loads the YAML configuration on top of the defaults.

    Parameters:
    config_path (str, optional): The YAML file. Falls back to the
        HUFTEXT_CONFIG environment variable (a .env file is read first),
        then to the defaults alone.

    Returns:
    dict: The merged configuration.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if config_path is None:
        load_dotenv(find_dotenv(usecwd=True))
        config_path = os.environ.get(CONFIG_ENV_VAR)
    if not config_path:
        return config

    try:
        with open(config_path, "r") as f:
            loaded = yaml.safe_load(f)
    except OSError as e:
        raise ResourceError(config_path, e) from e

    if loaded is None:
        return config
    if not isinstance(loaded, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping")
    _merge(config, loaded)

    for section in DEFAULT_CONFIG:
        if not isinstance(config[section], dict):
            raise ValueError(f"Config section '{section}' in {config_path} must be a mapping")

    encoding = config["text"]["encoding"]
    try:
        codecs.lookup(encoding)
    except (LookupError, TypeError) as e:
        raise ValueError(f"Unsupported text.encoding in {config_path}: {encoding}") from e

    policy = config["huffman"]["single_symbol"]
    if policy not in SINGLE_SYMBOL_POLICIES:
        raise ValueError(f"Unsupported huffman.single_symbol in {config_path}: {policy}")
    return config
