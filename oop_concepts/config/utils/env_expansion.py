"""Environment variable expansion for configuration values."""
import os
import re
from typing import Any

# ${VAR:default} is handled here; $VAR and ${VAR} fall through to os.path.expandvars
_DEFAULT_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*):([^}]*)\}")


def _expand_string(value: str) -> str:
    def replace(match: "re.Match[str]") -> str:
        return os.environ.get(match.group(1), match.group(2))

    return os.path.expandvars(_DEFAULT_PATTERN.sub(replace, value))


def expand_env_vars(value: Any) -> Any:
    """
    Recursively expand environment variables.

    Strings, and strings nested in dicts and lists, are expanded. Unknown
    variables without a default are left untouched. Other values are
    returned unchanged.
    """
    if isinstance(value, str):
        return _expand_string(value)
    if isinstance(value, dict):
        return {k: expand_env_vars(v) for k, v in value.items()}
    if isinstance(value, list):
        return [expand_env_vars(v) for v in value]
    return value


def expand_config_env_vars(config: dict) -> dict:
    """Expand environment variables across a whole configuration mapping."""
    return expand_env_vars(config)
