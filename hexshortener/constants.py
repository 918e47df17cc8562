# Short URL TTL bounds (seconds)
MAX_TTL_SECONDS = 3600
DEFAULT_TTL_SECONDS = 60

# Bulk shortening batch size limit
MAX_BULK_URLS = 50

# Short code length (hex characters used as the store key)
SHORTCODE_LENGTH = 7

# Application environment variables
APP_ENV_ENV = 'APP_ENV'
APP_NAME_ENV = 'APP_NAME'
PROJECT_ROOT_ENV = 'PROJECT_ROOT'
AWS_SAM_LOCAL_ENV = 'AWS_SAM_LOCAL'
LOG_LEVEL_ENV = 'LOG_LEVEL'

# Public base of generated short URLs, e.g. https://sho.rt
PUBLIC_HOST_ENV = 'PUBLIC_HOST'

# Redis connection URL, e.g. redis://localhost:6379/0 (overrides AppConfig)
REDIS_URL_ENV = 'REDIS_URL'

# AppConfig: identifiers of the configuration document
APPCONFIG_APP_ID_ENV = 'APPCONFIG_APP_ID'
APPCONFIG_ENV_ID_ENV = 'APPCONFIG_ENV_ID'
APPCONFIG_PROFILE_ID_ENV = 'APPCONFIG_PROFILE_ID'

# Error codes
UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'
