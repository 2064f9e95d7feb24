# Shortcode generation defaults
DEFAULT_SHORTCODE_LENGTH = 6
DEFAULT_SHORTCODE_MAX_ATTEMPTS = 5

# Durable backends
MONGODB_BACKEND = 'mongodb'
REDIS_BACKEND = 'redis'

# MongoDB defaults
DEFAULT_MONGO_URI = 'mongodb://localhost:27017'
DEFAULT_MONGO_DATABASE = 'urlshortener'
DEFAULT_MONGO_COLLECTION = 'urls'
DEFAULT_MONGO_TIMEOUT_MS = 5_000

# Application: environment variable names
APP_ENV_ENV = 'APP_ENV'
APP_NAME_ENV = 'APP_NAME'
PROJECT_ROOT_ENV = 'PROJECT_ROOT'
AWS_SAM_LOCAL_ENV = 'AWS_SAM_LOCAL'
AWS_LAMBDA_FUNCTION_NAME_ENV = 'AWS_LAMBDA_FUNCTION_NAME'
LOG_LEVEL_ENV = 'LOG_LEVEL'

# AppConfig: environment variable names
APPCONFIG_APP_ID_ENV = 'APPCONFIG_APP_ID'
APPCONFIG_ENV_ID_ENV = 'APPCONFIG_ENV_ID'
APPCONFIG_PROFILE_ID_ENV = 'APPCONFIG_PROFILE_ID'

# Error codes
UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'
