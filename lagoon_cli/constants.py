"""
Lagoon CLI Constants

Centralized constants for defaults, environment variable names and cache keys.
"""

# Default API / SSH Configuration
DEFAULT_API_ENDPOINT = "https://api.lagoon.amazeeio.cloud/graphql"
DEFAULT_SSH_HOST = "ssh.lagoon.amazeeio.cloud"
DEFAULT_SSH_PORT = 32222
DEFAULT_SSH_USER = "lagoon"

# Timeout Configuration
DEFAULT_SSH_TIMEOUT = 30
DEFAULT_CACHE_TIMEOUT = 600
SSH_CONNECTION_TIMEOUT = 5
API_REQUEST_TIMEOUT = 30

# Remote command that prints a fresh JWT on the SSH endpoint
TOKEN_COMMAND = "token"

# Project Configuration
LAGOON_YML = ".lagoon.yml"

# Environment Overrides
ENV_OVERRIDE_API = "LAGOON_OVERRIDE_API"
ENV_OVERRIDE_SSH = "LAGOON_OVERRIDE_SSH"
ENV_PROJECT = "LAGOON_PROJECT"
ENV_OVERRIDE_SSH_TIMEOUT = "LAGOON_OVERRIDE_SSH_TIMEOUT"
ENV_OVERRIDE_JWT_TOKEN = "LAGOON_OVERRIDE_JWT_TOKEN"
ENV_SSH_KEY = "LAGOON_SSH_KEY"
ENV_DISABLE_ALIASES = "LAGOON_DISABLE_ALIASES"
ENV_CACHE_DIR = "LAGOON_CACHE_DIR"
# Presence of any of these (any value) bypasses the cache
ENV_IGNORE_CACHE = ("LAGOON_IGNORE_CACHE", "LAGOON_IGNORE_DRUSHCACHE")

# Cache Configuration
DEFAULT_CACHE_DIR = "~/.cache/lagoon-cli"
TOKEN_CACHE_KEY = "jwt_token"
ENVIRONMENTS_CACHE_KEY_FORMAT = "lagoon_envs_{project}"

# Alias Configuration
ALIAS_NAMESPACE = "lagoon"
ALIAS_FILES_PATH = "/app/web/sites/default/files"
ALIAS_SSH_OPTIONS_FORMAT = (
    "-o UserKnownHostsFile=/dev/null -o StrictHostKeyChecking=no "
    "-o LogLevel=FATAL -p {port}"
)
PRODUCTION_SUFFIX = "(production)"

# Rollout Tasks
ROLLOUT_STAGES = ["pre", "post"]
ROLLOUT_SERVICE = "cli"

# Log Configuration
LOG_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"

# Error Messages
ERROR_PROJECT_NOT_FOUND = (
    "Could not discover project name, you should define it inside your "
    ".lagoon.yml file"
)
ERROR_NO_ENVIRONMENTS = (
    "API request didn't return any environments for the given project '{project}'"
)
