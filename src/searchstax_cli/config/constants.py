"""Default paths, environment variable names, and constants."""

from __future__ import annotations

import platformdirs

APP_NAME = "searchstax-cli"
APP_AUTHOR = "SearchStax"

CONFIG_DIR = platformdirs.user_config_path(APP_NAME, APP_AUTHOR)
CONFIG_FILE = CONFIG_DIR / "config.toml"

# Environment variable names
ENV_HOST = "SEARCHSTAX_HOST"
ENV_USERNAME = "SEARCHSTAX_USERNAME"
ENV_PASSWORD = "SEARCHSTAX_PASSWORD"
ENV_TOKEN = "SEARCHSTAX_TOKEN"
ENV_ACCOUNT = "SEARCHSTAX_ACCOUNT"
ENV_PROFILE = "SEARCHSTAX_PROFILE"

# API defaults
DEFAULT_HOST = "https://app.searchstax.com/api/rest/v2"
SIGN_IN_PATH = "/obtain-auth-token/"
DEFAULT_TIMEOUT = 30.0

# Lifecycle timings (seconds)
DEFAULT_POLL_INTERVAL = 60.0
DEFAULT_UPDATE_DELAY = 60.0
DEFAULT_USER_UPDATE_DELAY = 5.0
