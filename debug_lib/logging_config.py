from __future__ import annotations
import logging
from pathlib import Path
import yaml
from typing import Optional

DEFAULT_CONFIG_PATH = Path('data/config/server_config.yml')
LOG_FORMAT = '%(asctime)s %(levelname)s [%(name)s]: %(message)s'


def configure_logging(config_path: Optional[Path] = None) -> logging.Logger:
    """Configure root logging for the debug server.

    The level is read from the optional YAML file at `config_path` (key
    `log_level`) and defaults to WARNING when the file is absent or
    unreadable. Returns a module logger for the caller.
    """
    level = logging.WARNING

    cfg_path = config_path or DEFAULT_CONFIG_PATH
    if cfg_path.exists():
        try:
            with cfg_path.open('r', encoding='utf-8') as _f:
                _cfg = yaml.safe_load(_f) or {}
            _lvl = _cfg.get('log_level') if isinstance(_cfg, dict) else None
            if isinstance(_lvl, str):
                _numeric = getattr(logging, _lvl.upper(), None)
                if isinstance(_numeric, int):
                    level = _numeric
        except (OSError, yaml.YAMLError):
            # If config parse fails, fall back to default level
            level = logging.WARNING

    # Reconfigure root handlers to use the selected level and format
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logger = logging.getLogger(__name__)

    # uvicorn logs every request at INFO
    logging.getLogger('uvicorn.access').setLevel(logging.WARNING)
    logger.info("Log level set to: %s", logging.getLevelName(level))

    return logger
