from microurl.utils.config import app_env, app_name, app_prefix, environment_config, load_config
from microurl.utils.helpers import get_short_url, extract_code, require_environment
from microurl.utils.shortener import encode_id, decode_code
from microurl.utils.logging import initialize_logging


__all__ = [
    'encode_id',
    'decode_code',
    'app_env',
    'app_name',
    'app_prefix',
    'environment_config',
    'load_config',
    'get_short_url',
    'extract_code',
    'require_environment',
    'initialize_logging',
]
