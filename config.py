import logging
import os

BASE_DIR = os.path.dirname(os.path.abspath(__file__))

logger = logging.getLogger(__name__)

TRUTHY = ('1', 'true', 'yes', 'on')


def _get_env_int(name, default):
    value = os.environ.get(name)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            logger.warning('Invalid integer value for %s=%r, using default %s', name, value, default)
    return default


def _get_env_bool(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in TRUTHY


class Config:
    """Service settings read from ``COLOR_*`` environment variables."""

    def __init__(self):
        self.HOST = os.environ.get('COLOR_HOST', '0.0.0.0')
        self.PORT = _get_env_int('COLOR_PORT', 3000)
        self.STATIC_FOLDER = os.environ.get(
            'COLOR_STATIC_FOLDER', os.path.join(BASE_DIR, 'public'))
        self.LOG_LEVEL = os.environ.get('COLOR_LOG_LEVEL', 'INFO')
        self.DEBUG = _get_env_bool('COLOR_DEBUG')
