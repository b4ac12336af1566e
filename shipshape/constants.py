"""Global constants for shipshape"""

from enum import Enum

APP_NAME = "shipshape"

# Configuration files
CONFIG_FILE = "shipshape.config.json"
CONFIG_FILE_CANDIDATES = [
    CONFIG_FILE,
    "shipshape.config.yaml",
    "shipshape.config.yml",
]
YAML_SUFFIXES = (".yaml", ".yml")

# Configuration keys as they appear in the file
KEY_DEFAULT = "default"
KEY_ENVIRONMENTS = "environments"
KEY_SOURCE = "source"
KEY_DESTINATION = "destination"
KEY_PRE_DEPLOY = "preDeploy"
KEY_POST_DEPLOY = "postDeploy"
KEY_KEEP_LIST = "keepList"

# UNC paths start with a double backslash
UNC_PREFIX = "\\\\"

# Logging
LOG_FORMAT = "%(message)s"

# Supported platform for the CLI entry point
SUPPORTED_PLATFORM = "win32"


# Deployment phases
class DeployPhase(Enum):
    PRE_DEPLOY = "pre_deploy"
    RECONCILE = "reconcile"
    COPY = "copy"
    POST_DEPLOY = "post_deploy"
    DONE = "done"
    FAILED = "failed"


# Error codes
class ErrorCode:
    CONFIG_NOT_FOUND = "SS001"
    CONFIG_PARSE_ERROR = "SS002"
    CONFIG_INVALID = "SS003"
    INVALID_ENVIRONMENT = "SS004"
    MISSING_REQUIRED_FIELD = "SS005"
    SAME_SOURCE_DESTINATION = "SS006"
    SOURCE_NOT_FOUND = "SS007"
    RECONCILE_FAILED = "SS008"
    COPY_FAILED = "SS009"
    COMMAND_FAILED = "SS010"
    UNSUPPORTED_PLATFORM = "SS011"


# Environment variables
ENV_CONFIG_PATH = "SHIPSHAPE_CONFIG"
ENV_ENVIRONMENT = "SHIPSHAPE_ENV"
ENV_LOG_LEVEL = "SHIPSHAPE_LOG_LEVEL"
ENV_ALLOW_ANY_PLATFORM = "SHIPSHAPE_ALLOW_ANY_PLATFORM"

# Display constants
EMOJI_SUCCESS = "✅"
EMOJI_ERROR = "❌"

# Phase markers
MSG_PRE_DEPLOY_START = "--- Running Pre-deployment Commands ---"
MSG_PRE_DEPLOY_END = "--- Pre-deployment Commands Finished ---"
MSG_PRE_DEPLOY_NONE = "No pre-deployment commands to run."
MSG_COPY_START = "--- Copying Files ---"
MSG_COPY_END = "--- File Copying Finished ---"
MSG_POST_DEPLOY_START = "--- Running Post-deployment Commands ---"
MSG_POST_DEPLOY_END = "--- Post-deployment Commands Finished ---"
MSG_POST_DEPLOY_NONE = "No post-deployment commands to run."

# Messages templates
MSG_DEPLOY_START = "Starting deployment..."
MSG_DEPLOY_SUCCESS = f"{EMOJI_SUCCESS} Deployment completed successfully!"
MSG_DEPLOY_FAILED = f"{EMOJI_ERROR} Deployment failed!"
MSG_RUNNING_COMMAND = '> Running command: "{command}"'
MSG_COMMAND_SUCCESS = '> Command "{command}" finished successfully.'
MSG_COMMAND_FAILED = '> Command "{command}" failed with exit code {code}.'
MSG_PRESERVING = "Preserving {count} items: {names}"
MSG_REMOVING = "Removing {count} items from destination"
MSG_USING_ENVIRONMENT = "Using environment-specific configuration for {environment}"
MSG_USING_DEFAULT = "Using default configuration (no environment-specific settings)"
MSG_UNSUPPORTED_PLATFORM = "This deployment tool is designed to run only on Windows."
