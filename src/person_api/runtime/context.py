"""Process-wide configuration, overridable per context.

The configuration is read once from the file named by ``APP_CONFIG_FILE``.
Code reads it through ``get_config()``; tests and scripts swap parts of it
with ``with_context()``.
"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from pathlib import Path

from src.person_api.runtime.config.config_data import ConfigData
from src.person_api.runtime.config.config_template import load_config
from src.person_api.runtime.config.settings import EnvironmentVariables


@dataclass(frozen=True)
class AppContext:
    config: ConfigData


def _startup_config() -> ConfigData:
    env = EnvironmentVariables()
    return load_config(Path(env.config_file), env.environment)


# Threads and tasks that never override the context all see this one object
_current: ContextVar[AppContext] = ContextVar(
    "person_api_context", default=AppContext(config=_startup_config())
)


def _deep_update(base: dict, changes: dict) -> dict:
    merged = dict(base)
    for key, value in changes.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_update(merged[key], value)
        else:
            merged[key] = value
    return merged


def get_config() -> ConfigData:
    return _current.get().config


def set_config(config: ConfigData) -> None:
    """Replace the configuration for the rest of the current context."""
    _current.set(AppContext(config=config))


@contextmanager
def with_context(config_override: ConfigData | None = None):
    """Run a block with ``config_override`` layered over the current config.

    Only fields that were set explicitly on the override replace the current
    values, so ``ConfigData(validation=ValidationConfig(require_age=True))``
    changes that one flag and nothing else.
    """
    if config_override is None:
        yield
        return

    if not isinstance(config_override, ConfigData):
        raise ValueError(
            f"config_override must be ConfigData or None, got {type(config_override)}"
        )

    merged = _deep_update(
        get_config().model_dump(), config_override.model_dump(exclude_unset=True)
    )
    token = _current.set(AppContext(config=ConfigData.model_validate(merged)))
    try:
        yield
    finally:
        _current.reset(token)
