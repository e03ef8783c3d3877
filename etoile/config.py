from __future__ import annotations
import logging
import os
from pathlib import Path


# Resolve installation dir (etoile package directory)
_ETOILE_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_DIR = _ETOILE_DIR / 'prelude'
_DEFAULT_LOG_LEVEL = 'WARNING'

PRELUDE_FILE = 'std.lisp'
LOG_FORMAT = '%(levelname)s %(name)s: %(message)s'


def get_prelude_root() -> Path:
    raw = os.environ.get('ETOILE_PRELUDE_PATH', '').strip()
    if not raw:
        return _DEFAULT_PRELUDE_DIR
    p = Path(raw)
    # treat as a single directory; if a file path is set, use its parent
    return p if p.is_dir() else p.parent


def get_prelude_file() -> Path:
    return get_prelude_root() / PRELUDE_FILE


def get_log_level() -> int:
    name = os.environ.get('ETOILE_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"Invalid ETOILE_LOG_LEVEL: {name!r}")
    return level


def configure_logging() -> None:
    """Attach a stderr handler to the `etoile` logger at ETOILE_LOG_LEVEL."""
    logger = logging.getLogger('etoile')
    logger.setLevel(get_log_level())
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
