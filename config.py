import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


def _get(key, default=None):
    """Environment variables override env.yaml values.

    Non-string settings given through the environment are parsed as YAML
    scalars/lists so that ``CORS_ORIGINS='["http://a"]'`` or
    ``BCRYPT_ROUNDS=10`` keep their types.
    """
    if key in os.environ:
        raw = os.environ[key]
        if isinstance(default, str):
            return raw
        value = yaml.safe_load(raw)
    else:
        value = data.get(key, default)

    # Bare string for a list setting means a single entry
    if isinstance(default, list) and not isinstance(value, list):
        return [value] if value else []
    return value


class ApplicationConfig:
    DB_URI = _get("DB_URI", "sqlite+aiosqlite:///./app.db")
    DB_AUTO_CREATE = bool(_get("DB_AUTO_CREATE", True))
    API_PREFIX = _get("API_PREFIX", "/api")
    API_PORT = _get("API_PORT", 3001)
    API_HOST = _get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = _get("CORS_ORIGINS", ["http://localhost:5173"])
    CORS_ALLOW_CREDENTIALS = _get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = _get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(_get("ENABLE_LOGGING_MIDDLEWARE", 1))
    # No default: startup fails when the signing secret is not provisioned
    JWT_SECRET = str(_get("JWT_SECRET", "") or "")
    JWT_EXPIRES_DAYS = _get("JWT_EXPIRES_DAYS", 7)
    BCRYPT_ROUNDS = _get("BCRYPT_ROUNDS", 12)
