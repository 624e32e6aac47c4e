from kvshortener.utils.config import app_env, app_name, app_prefix, load_config
from kvshortener.utils.helpers import base_url, get_short_url, origin_of, require_environment, guarantee_500_response
from kvshortener.utils.shortener import random_key, generate_key, reverse_index_key
from kvshortener.utils.logging import initialize_logging


__all__ = [
    'random_key',
    'generate_key',
    'reverse_index_key',
    'app_env',
    'app_name',
    'app_prefix',
    'load_config',
    'base_url',
    'get_short_url',
    'origin_of',
    'require_environment',
    'guarantee_500_response',
    'initialize_logging',
]
