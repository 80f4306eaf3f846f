"""Logger setup for semiplane.

Library modules only ever call :func:`get_logger`; nothing is printed until
an entry point (demo, fuzz script, user code) calls :func:`configure_logging`,
which attaches one stream handler to the ``semiplane`` logger and stops
records from reaching the process root logger.
"""
from __future__ import annotations

import logging
import sys
from typing import IO, Optional, Union

PACKAGE_LOGGER = 'semiplane'
DEFAULT_FORMAT = '%(levelname)s %(name)s: %(message)s'

# attribute set on the handler we own so reconfiguring replaces it instead of stacking
_OWNED = '_semiplane_owned'


def _qualify(name: str) -> str:
    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + '.'):
        return name
    return f'{PACKAGE_LOGGER}.{name}'


def _to_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        raise ValueError(f'unknown log level {level!r}')
    return resolved


def configure_logging(level: Union[str, int] = 'INFO', stream: Optional[IO[str]] = None,
                      fmt: str = DEFAULT_FORMAT, mute_external: bool = True) -> logging.Logger:
    """Send the semiplane logger family to ``stream`` (stdout by default) at ``level``.

    Calling it again swaps the handler rather than adding a second one. The
    process root logger is left alone.
    """
    pkg = logging.getLogger(PACKAGE_LOGGER)
    for h in list(pkg.handlers):
        if getattr(h, _OWNED, False) or isinstance(h, logging.NullHandler):
            pkg.removeHandler(h)
    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(logging.Formatter(fmt))
    setattr(handler, _OWNED, True)
    pkg.addHandler(handler)
    pkg.propagate = False

    lvl = _to_level(level)
    pkg.setLevel(lvl)
    # plot_clip pulls in matplotlib, whose font manager floods DEBUG output
    if mute_external and lvl <= logging.DEBUG:
        logging.getLogger('matplotlib').setLevel(logging.INFO)
    return pkg


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Return the logger ``name`` inside the semiplane namespace.

    Bare names are prefixed (``'polygon'`` -> ``'semiplane.polygon'``). Without
    ``level`` the logger inherits from the package logger.
    """
    log = logging.getLogger(_qualify(name))
    log.setLevel(logging.NOTSET if level is None else _to_level(level))
    return log


__all__ = ['PACKAGE_LOGGER', 'configure_logging', 'get_logger']
