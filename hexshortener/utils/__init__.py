from hexshortener.utils.config import app_env, app_name, project_root, app_prefix, load_config
from hexshortener.utils.helpers import base_url, public_host, get_short_url, require_environment, guarantee_500_response
from hexshortener.utils.extractor import extract_url
from hexshortener.utils.shortener import generate_shortcode, encode_url, decode_url
from hexshortener.utils.logging import initialize_logging


__all__ = [
    'extract_url',
    'generate_shortcode',
    'encode_url',
    'decode_url',
    'app_env',
    'app_name',
    'app_prefix',
    'project_root',
    'load_config',
    'base_url',
    'public_host',
    'get_short_url',
    'require_environment',
    'guarantee_500_response',
    'initialize_logging',
]
