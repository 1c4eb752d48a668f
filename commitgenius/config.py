"""Runtime configuration for commitgenius.

Configuration is loaded from ~/.commitgenius/config.yaml and the environment.
Use 'commitgenius config' commands to modify settings.
"""

import os


# ============================================================
# DEFAULT FALLBACK VALUES
# ============================================================
# These are used only if ~/.commitgenius/config.yaml doesn't exist

DEFAULT_MODEL = "llama2"
DEFAULT_TEMPERATURE = 0.7
DEFAULT_HOST = "http://localhost:11434"
DEFAULT_TIMEOUT = 60.0
DEFAULT_LANGUAGE = "en"
DEFAULT_USE_CONVENTIONAL = False
DEFAULT_MAX_SUBJECT_LENGTH = 50

# Generation is capped to keep local models fast and terse
MAX_TEMPERATURE = 0.3
MAX_TOKENS = 50
TOP_P = 0.9
TOP_K = 40

HOST_ENV_VAR = "OLLAMA_HOST"


# ============================================================
# ACTIVE CONFIGURATION (loaded from global config)
# ============================================================

# Initially set to defaults - will be overridden by load_config()
ACTIVE_MODEL = DEFAULT_MODEL
TEMPERATURE = DEFAULT_TEMPERATURE
HOST = DEFAULT_HOST
TIMEOUT = DEFAULT_TIMEOUT
LANGUAGE = DEFAULT_LANGUAGE
USE_CONVENTIONAL = DEFAULT_USE_CONVENTIONAL
MAX_SUBJECT_LENGTH = DEFAULT_MAX_SUBJECT_LENGTH


def load_config() -> None:
    """Load configuration from the global config file and environment.

    This should be called by the CLI before talking to the model.
    """
    global ACTIVE_MODEL, TEMPERATURE, HOST, TIMEOUT, LANGUAGE, USE_CONVENTIONAL, MAX_SUBJECT_LENGTH

    # Import here to avoid circular dependency
    from commitgenius import global_config

    try:
        config = global_config.load_global_config()
    except global_config.GlobalConfigError:
        # Keep defaults; 'commitgenius config show' reports the broken file
        config = global_config.GlobalConfig()

    ACTIVE_MODEL = config.model.default_model
    TEMPERATURE = config.model.temperature
    HOST = config.model.host
    TIMEOUT = config.model.timeout
    LANGUAGE = config.language.default_language
    USE_CONVENTIONAL = config.format.use_conventional_commits
    MAX_SUBJECT_LENGTH = config.format.max_subject_length

    host_override = os.getenv(HOST_ENV_VAR)
    if host_override:
        HOST = normalize_host(host_override)


def normalize_host(host: str) -> str:
    """Normalize an Ollama host value into a base URL.

    OLLAMA_HOST is commonly given as "host:port" without a scheme.

    Args:
        host: Host value from config or environment.

    Returns:
        Base URL with scheme and without trailing slash.
    """
    host = host.strip()
    if "://" not in host:
        host = f"http://{host}"
    return host.rstrip("/")
