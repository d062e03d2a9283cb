"""Constants for the quicktypegen package."""

DEFAULT_ROOT_NAME = 'ApiResponse'
DEFAULT_FILE_NAME = 'ApiTypes'
ROOT_NAME_SUFFIX = 'Response'
FILE_NAME_SUFFIX = 'Types'
UNKNOWN_TYPE_NAME = 'Unknown'

# HTTP collaborator
DEFAULT_TIMEOUT = 30  # seconds
MAX_RESPONSE_SIZE = 10 * 1024 * 1024  # 10MB
USER_AGENT = 'QuickType/1.0.0'
DEFAULT_ACCEPT = 'application/json, text/plain, */*'
ALLOWED_SCHEMES = ('http', 'https')
ALLOWED_METHODS = ('GET', 'POST', 'PUT', 'DELETE', 'PATCH')

# File persistence
DEFAULT_SAVE_DIR_NAME = 'quick-type-types'
TYPESCRIPT_EXTENSION = '.ts'
