import copy
import json
import logging
import os
from pathlib import Path

from .errors import InvalidArgument

log = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    'check': {
        'handles': True,
    },
    'consolidate': {
        'slack': 2,
    },
    'log': {
        'level': 'WARNING',
    },
}

ENV_CONFIG = 'FIBHEAP_CONFIG'

_config = copy.deepcopy(DEFAULT_CONFIG)


def _check_slack(value):
    if not isinstance(value, int) or isinstance(value, bool) or value < 2:
        raise InvalidArgument(
            f"consolidate.slack must be an integer >= 2, got {value!r}")


def _check_bool(value):
    if not isinstance(value, bool):
        raise InvalidArgument(f"expected a bool, got {value!r}")


def _check_level(value):
    if not isinstance(value, str) or not isinstance(
            logging.getLevelName(value.upper()), int):
        raise InvalidArgument(f"unknown log level {value!r}")


_validators = {
    'check.handles': _check_bool,
    'consolidate.slack': _check_slack,
    'log.level': _check_level,
}


def queryKey(q, dct, prefix=None):
    if prefix is None:
        prefix = []

    keys = q.split('.', maxsplit=1)

    if not isinstance(dct, dict):
        k = '.'.join(prefix)
        raise KeyError(
            f"Query {k}.{q} error, type '{k}' is {type(dct)}, not dict.")
    try:
        sub = dct[keys[0]]
    except KeyError:
        k = '.'.join([*prefix, keys[0]])
        raise KeyError(
            f"Query {'.'.join([*prefix, q])} error, key '{k}' not found.")

    if len(keys) == 1:
        return sub

    else:
        return queryKey(keys[1], sub, [*prefix, keys[0]])


def setKey(q, value, dct, prefix=None):
    if prefix is None:
        prefix = []

    keys = q.split('.', maxsplit=1)

    if len(keys) == 1:
        if keys[0] in dct and isinstance(dct[keys[0]],
                                         dict) and not isinstance(value, dict):
            k = '.'.join([*prefix, keys[0]])
            raise ValueError(f'try to set a dict {k} to {type(value)}')
        dct[keys[0]] = value
    else:
        sub = dct.setdefault(keys[0], {})
        if not isinstance(sub, dict):
            k = '.'.join([*prefix, keys[0]])
            raise ValueError(f'try to set a dict {k} to {type(value)}')
        setKey(keys[1], value, sub, [*prefix, keys[0]])


def flattenDict(dct, prefix=''):
    ret = {}
    for k, v in dct.items():
        if isinstance(v, dict):
            ret.update(flattenDict(v, f'{prefix}{k}.'))
        else:
            ret[f'{prefix}{k}'] = v
    return ret


def query(q=None):
    """
    Read a configuration value by dotted key.

    Args:
        q: dotted key such as ``'consolidate.slack'``. ``None`` returns a
            copy of the whole configuration.

    Returns:
        the configured value
    """
    if q is None:
        return copy.deepcopy(_config)
    return queryKey(q, _config)


def set_config(q, value):
    if q not in _validators:
        raise InvalidArgument(f"unknown configuration key {q!r}")
    _validators[q](value)
    setKey(q, value, _config)
    log.debug("config %s = %r", q, value)


def update_config(updates):
    flat = flattenDict(updates)
    for q, value in flat.items():
        if q not in _validators:
            raise InvalidArgument(f"unknown configuration key {q!r}")
        _validators[q](value)
    for q, value in flat.items():
        setKey(q, value, _config)
    return query()


def load_config(path=None):
    """
    Load a JSON configuration file on top of the current configuration.

    Without ``path`` the file named by the ``FIBHEAP_CONFIG`` environment
    variable is used; if that is unset nothing is loaded.
    """
    if path is None:
        path = os.environ.get(ENV_CONFIG)
        if not path:
            return query()
    path = Path(path)
    with open(path, 'r') as f:
        updates = json.load(f)
    log.debug("loading config from %s", path)
    return update_config(updates)


def reset_config():
    global _config
    _config = copy.deepcopy(DEFAULT_CONFIG)


def configure_logging(level=None):
    if level is None:
        level = query('log.level')
    logger = logging.getLogger('fibheap')
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
