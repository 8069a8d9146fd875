import os
from dataclasses import dataclass

DEFAULT_CONTAINER_NAME = "$web"
DEFAULT_PORT = 8080

PORT_ENV = "FUNCTIONS_CUSTOMHANDLER_PORT"


class ConfigError(ValueError):
    """Raised when a required setting is missing or malformed."""

    def __init__(self, message, env_var=None):
        super().__init__(message)
        self.env_var = env_var


@dataclass(frozen=True)
class Config:
    storage_account_name: str
    storage_account_key: str
    container_name: str
    api_key: str
    base_url: str


# checked in this order; the first empty one is reported
REQUIRED_SETTINGS = (
    ("storage_account_name", "STORAGE_ACCOUNT_NAME"),
    ("storage_account_key", "STORAGE_ACCOUNT_KEY"),
    ("container_name", "CONTAINER_NAME"),
    ("api_key", "API_KEY"),
    ("base_url", "BASE_URL"),
)


def get_env_or_default(key: str, default: str, environ=None) -> str:
    """
    Return the environment value for key, or default when it is unset or empty.
    """
    env = os.environ if environ is None else environ
    value = env.get(key, "")
    if value == "":
        return default
    return value


def load_config(environ=None) -> Config:
    env = os.environ if environ is None else environ
    return Config(
        storage_account_name=env.get("STORAGE_ACCOUNT_NAME", ""),
        storage_account_key=env.get("STORAGE_ACCOUNT_KEY", ""),
        container_name=get_env_or_default("CONTAINER_NAME", DEFAULT_CONTAINER_NAME, env),
        api_key=get_env_or_default("API_KEY", "", env),
        base_url=env.get("BASE_URL", ""),
    )


def validate_config(config: Config) -> None:
    for field, env_var in REQUIRED_SETTINGS:
        if not getattr(config, field):
            raise ConfigError(f"{env_var} is required", env_var=env_var)


def get_listen_port(environ=None) -> int:
    env = os.environ if environ is None else environ
    raw = env.get(PORT_ENV, "")
    if raw == "":
        return DEFAULT_PORT
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{PORT_ENV} must be an integer, got {raw!r}", env_var=PORT_ENV)
