import logging
from pathlib import Path

LOG_DIR = Path(__file__).parent.parent / "logs"
LOG_FILE = LOG_DIR / "app.log"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Level used to silence a logger completely in 'off' mode
DISABLED_LEVEL = logging.CRITICAL + 1

# Cache for log mode to avoid repeated config reads
_log_mode_cache = None


def _get_log_mode():
    """Get log mode from configuration."""
    global _log_mode_cache
    if _log_mode_cache is not None:
        return _log_mode_cache

    try:
        from medtranslate.config import load_config
        config = load_config()
        log_mode = config.get('log_mode', 'info')
        _log_mode_cache = log_mode
        return log_mode
    except ImportError:
        # config is still importing (it creates its own logger at import time)
        return 'info'


def _level_for(log_mode: str) -> int:
    if log_mode == 'debug':
        return logging.DEBUG
    if log_mode == 'off':
        return DISABLED_LEVEL
    return logging.INFO


def _apply_log_mode(logger: logging.Logger, log_mode: str) -> None:
    """Set levels and add/remove the file handler of a logger for the given mode."""
    level = _level_for(log_mode)
    logger.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT)
    file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]

    if log_mode != 'off' and not file_handlers:
        LOG_DIR.mkdir(exist_ok=True)
        f_handler = logging.FileHandler(LOG_FILE, encoding='utf-8')
        f_handler.setLevel(logging.DEBUG)
        f_handler.setFormatter(formatter)
        logger.addHandler(f_handler)
    elif log_mode == 'off' and file_handlers:
        for handler in file_handlers:
            handler.close()
            logger.removeHandler(handler)

    console_handlers = [
        h for h in logger.handlers
        if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
    ]
    if not console_handlers:
        c_handler = logging.StreamHandler()
        c_handler.setFormatter(formatter)
        logger.addHandler(c_handler)
        console_handlers = [c_handler]

    for handler in console_handlers:
        handler.setLevel(level)


def refresh_log_mode(log_mode: str = None):
    """
    Re-apply the log mode to every logger created by get_logger.

    With no argument the mode is re-read from the config file.
    """
    global _log_mode_cache
    _log_mode_cache = log_mode

    log_mode = _get_log_mode()
    for logger_name in list(logging.Logger.manager.loggerDict.keys()):
        if not logger_name.startswith('medtranslate'):
            continue
        logger = logging.getLogger(logger_name)
        if logger.handlers:
            _apply_log_mode(logger, log_mode)


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    _apply_log_mode(logger, _get_log_mode())
    return logger
