"""
Breakout logging.

Every module asks for its own named logger; lines are printed to stdout
as ``[name] LEVEL: message``. Levels are resolved per call against a
shared table, so reconfiguring affects loggers that already exist.

    from breakout.logging import get_logger

    log = get_logger('progression')
    log.info("Level %d cleared", level)
    log.trace("Brick %s hit", (row, col))

Levels come from the environment at import time:

    BREAKOUT_LOG_LEVEL=DEBUG        default for every logger
    BREAKOUT_LOG_PHYSICS=TRACE      override for the 'physics' logger

and can be changed later with configure_logging() (the CLI's
``--log-level`` ends up there).
"""

import os
from enum import IntEnum
from functools import lru_cache
from typing import Any, Dict, Optional


class LogLevel(IntEnum):
    """Numeric severities; higher is more severe."""
    TRACE = 5      # Per-tick detail, e.g. every brick hit
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    OFF = 100


ENV_PREFIX = 'BREAKOUT_LOG_'
ENV_DEFAULT = ENV_PREFIX + 'LEVEL'

# Printed label for each level
_LABELS: Dict[LogLevel, str] = {
    LogLevel.TRACE: 'TRACE',
    LogLevel.DEBUG: 'DEBUG',
    LogLevel.INFO: 'INFO',
    LogLevel.WARNING: 'WARN',
    LogLevel.ERROR: 'ERROR',
    LogLevel.CRITICAL: 'CRITICAL',
}

_config: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'module_levels': {},
}


def parse_level(name: str) -> LogLevel:
    """Look up a level by name; unknown names mean INFO."""
    name = name.strip().upper()
    if name == 'WARN':
        return LogLevel.WARNING
    try:
        return LogLevel[name]
    except KeyError:
        return LogLevel.INFO


def _key(module: str) -> str:
    return module.lower().replace('.', '_').replace('/', '_')


def configure_logging(
    level: str = 'INFO',
    modules: Optional[Dict[str, str]] = None,
) -> None:
    """Set the default level and, optionally, per-module overrides.

    Args:
        level: Level name applied to every logger without an override
        modules: Mapping of logger name to level name
    """
    _config['default_level'] = parse_level(level)
    for module, module_level in (modules or {}).items():
        _config['module_levels'][_key(module)] = parse_level(module_level)


def _load_env_config() -> None:
    if ENV_DEFAULT in os.environ:
        _config['default_level'] = parse_level(os.environ[ENV_DEFAULT])

    overrides = {
        name[len(ENV_PREFIX):]: value
        for name, value in os.environ.items()
        if name.startswith(ENV_PREFIX) and name != ENV_DEFAULT
    }
    for module, value in overrides.items():
        _config['module_levels'][_key(module)] = parse_level(value)


_load_env_config()


class BreakoutLogger:
    """Named logger that prints through the shared level table."""

    def __init__(self, module: str):
        self.module = module
        self._key = _key(module)

    @property
    def level(self) -> LogLevel:
        """Effective level: the module override if set, else the default."""
        return _config['module_levels'].get(self._key, _config['default_level'])

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level >= self.level

    def log(self, level: LogLevel, msg: str, *args) -> None:
        """Print msg at level, %-formatting it with args."""
        if not self.is_enabled_for(level):
            return
        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"
        print(f"[{self.module}] {_LABELS.get(level, level.name)}: {msg}")

    def trace(self, msg: str, *args) -> None:
        self.log(LogLevel.TRACE, msg, *args)

    def debug(self, msg: str, *args) -> None:
        self.log(LogLevel.DEBUG, msg, *args)

    def info(self, msg: str, *args) -> None:
        self.log(LogLevel.INFO, msg, *args)

    def warning(self, msg: str, *args) -> None:
        self.log(LogLevel.WARNING, msg, *args)

    def error(self, msg: str, *args) -> None:
        self.log(LogLevel.ERROR, msg, *args)


@lru_cache(maxsize=64)
def get_logger(module: str) -> BreakoutLogger:
    """Get the logger for a module name; one instance per name."""
    return BreakoutLogger(module)


def disable_logging() -> None:
    """Silence every logger and drop module overrides."""
    _config['default_level'] = LogLevel.OFF
    _config['module_levels'].clear()


def snapshot_config() -> Dict[str, Any]:
    """Copy of the current level table, for restore_config()."""
    return {
        'default_level': _config['default_level'],
        'module_levels': dict(_config['module_levels']),
    }


def restore_config(snapshot: Dict[str, Any]) -> None:
    """Put back levels saved by snapshot_config()."""
    _config['default_level'] = snapshot['default_level']
    _config['module_levels'].clear()
    _config['module_levels'].update(snapshot['module_levels'])
