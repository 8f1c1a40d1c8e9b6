# -*- coding: utf-8 -*-
import copy

import toml

from .security import DEFAULT_CONFIDENCE_THRESHOLD
from .util import getLogger


LOGGER = getLogger(__name__)

DEFAULTS = {
    'security': {
        'confidence_threshold': DEFAULT_CONFIDENCE_THRESHOLD,
    },
    'logging': {
        'level': 'info',
    },
}


class ConfigError(Exception):
    pass


def load_config(config_path=None):
    """
    Reads a TOML configuration file and merges it over the defaults.
    Without a path the defaults are returned as is.
    """
    cfg = copy.deepcopy(DEFAULTS)
    if config_path is None:
        return cfg

    try:
        with open(config_path) as config_file:
            file_cfg = toml.load(config_file)
    except (OSError, toml.TomlDecodeError) as ex:
        raise ConfigError("Failed reading configuration {0}: {1}".format(config_path, ex)) from ex

    for section, values in file_cfg.items():
        if not isinstance(values, dict):
            raise ConfigError("Configuration entry {0} is not a section".format(section))
        cfg.setdefault(section, {}).update(values)

    _validate(cfg)
    LOGGER.debug("Loaded configuration from %s: %s", config_path, cfg)
    return cfg


def _validate(cfg):
    threshold = cfg['security']['confidence_threshold']
    if isinstance(threshold, bool) or not isinstance(threshold, (int, float)):
        raise ConfigError("confidence_threshold must be a number, got {0!r}".format(threshold))
    if not 0 <= threshold <= 100:
        raise ConfigError("confidence_threshold must be within 0 and 100, got {0}".format(threshold))

    level = cfg['logging']['level']
    if not isinstance(level, str) or level.upper() not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
        raise ConfigError("Unsupported logging level {0!r}".format(level))
