import logging
import math
import os
from dataclasses import dataclass

import yaml

import maths_util

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), "Configs", "config.yaml")

MATHS_SECTION = "maths"


class SettingsError(ValueError):
    message: str

    def __init__(
        self,
        message: str,
        *args
    ):
        super().__init__(message, *args)
        self.message = message


@dataclass
class MathsSettings:
    # Default tolerance for approximate vector comparison.
    epsilon: float = maths_util.EPSILON


_current_settings = None


def _parse_epsilon(value) -> float:
    if isinstance(value, bool):
        raise SettingsError(f"Expected a number for {MATHS_SECTION}.epsilon. Got {value!r}.")
    try:
        epsilon = float(value)
    except (TypeError, ValueError) as e:
        raise SettingsError(f"Expected a number for {MATHS_SECTION}.epsilon. Got {value!r}.") from e
    if math.isnan(epsilon) or epsilon < 0.0:
        raise SettingsError(f"{MATHS_SECTION}.epsilon must be a non-negative number. Got {value!r}.")
    return epsilon


def parse_settings(configs) -> MathsSettings:
    '''
    Build settings from an already loaded config mapping.
    Missing sections or keys keep their defaults.
    '''
    if configs is None:
        return MathsSettings()
    if not isinstance(configs, dict):
        raise SettingsError(f"Expected a mapping at the top of the config. Got {type(configs).__name__}.")

    maths_configs = configs.get(MATHS_SECTION)
    if maths_configs is None:
        return MathsSettings()
    if not isinstance(maths_configs, dict):
        raise SettingsError(f"Expected a mapping for section '{MATHS_SECTION}'.")

    settings = MathsSettings()
    if "epsilon" in maths_configs:
        settings.epsilon = _parse_epsilon(maths_configs["epsilon"])
    return settings


def load_settings(path=None) -> MathsSettings:
    '''
    Read maths settings from a YAML file.
    An explicit path must exist. Without one, the bundled Configs/config.yaml
    is used when present and the built-in defaults otherwise.
    '''
    if path is None:
        path = DEFAULT_CONFIG_PATH
        if not os.path.exists(path):
            logger.debug(f"No config at {path}, using default maths settings")
            return MathsSettings()

    with open(path, "r") as f:
        try:
            configs = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise SettingsError(f"Failed to parse config file {path}: {e}") from e

    settings = parse_settings(configs)
    logger.info(f"Loaded maths settings from {path}")
    return settings


def get_settings() -> MathsSettings:
    global _current_settings
    if _current_settings is None:
        _current_settings = load_settings()
    return _current_settings


def use_settings(settings: MathsSettings):
    # Passing None makes the next get_settings() reload from disk.
    global _current_settings
    _current_settings = settings
