"""Server configuration for pylistserver."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pylistserver._constants import (
    DEFAULT_DATA_SIZE,
    DEFAULT_HOST,
    DEFAULT_PAGE_SIZE,
    DEFAULT_PORT,
    DEFAULT_VALUE_TEMPLATE,
)
from pylistserver.exceptions import ListConfigError
from pylistserver.state.policy import HasMorePolicy


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_int(env_key: str, value: str) -> int:
    try:
        return int(value.strip())
    except ValueError as exc:
        raise ListConfigError(f"{env_key} must be an integer, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class ListServerConfig:
    """Server configuration.

    Parameters
    ----------
    host : str
        Interface the HTTP server binds to.
    port : int
        TCP port of the HTTP server.
    data_size : int
        Number of synthetic items created at startup (ids ``1..data_size``).
    value_template : str
        ``str.format`` template for item values; receives ``id``.
    initial_page_size : int
        Number of items returned by ``GET /api/initial-state``.
    strict_validation : bool
        Reject orders that are not a permutation of all ids and
        selections that reference unknown ids.  When disabled, both
        are stored as submitted.
    has_more_policy : HasMorePolicy
        How the ``hasMore`` flag of a page is computed.
    """

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    data_size: int = DEFAULT_DATA_SIZE
    value_template: str = DEFAULT_VALUE_TEMPLATE
    initial_page_size: int = DEFAULT_PAGE_SIZE
    strict_validation: bool = True
    has_more_policy: HasMorePolicy = HasMorePolicy.EXACT

    def __post_init__(self) -> None:
        if not 0 < self.port < 65536:
            raise ListConfigError(f"port must be between 1 and 65535, got {self.port}")
        if self.data_size < 0:
            raise ListConfigError(f"data_size must be non-negative, got {self.data_size}")
        if self.initial_page_size <= 0:
            raise ListConfigError(f"initial_page_size must be positive, got {self.initial_page_size}")
        if "{id}" not in self.value_template:
            raise ListConfigError("value_template must contain the '{id}' placeholder")
        try:
            self.value_template.format(id=1)
        except (AttributeError, IndexError, KeyError, ValueError) as exc:
            raise ListConfigError(f"value_template cannot be formatted with an id: {exc!r}") from exc

    @classmethod
    def from_env(cls, **overrides: Any) -> ListServerConfig:
        """Create configuration from environment variables.

        Reads the optional ``LISTSERVER_*`` variables.  Explicit keyword
        arguments override environment values.

        Raises
        ------
        ListConfigError
            When a numeric or enum variable cannot be parsed.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        host = env.get("LISTSERVER_HOST")
        if host is not None:
            config_kwargs["host"] = host.strip()

        template = env.get("LISTSERVER_VALUE_TEMPLATE")
        if template is not None:
            config_kwargs["value_template"] = template

        _ENV_INT_MAP = {
            "LISTSERVER_PORT": "port",
            "LISTSERVER_DATA_SIZE": "data_size",
            "LISTSERVER_INITIAL_PAGE_SIZE": "initial_page_size",
        }
        for env_key, field_name in _ENV_INT_MAP.items():
            val = env.get(env_key)
            if val is not None and field_name not in overrides:
                config_kwargs[field_name] = _env_int(env_key, val)

        if "strict_validation" not in overrides:
            config_kwargs["strict_validation"] = _env_bool(env.get("LISTSERVER_STRICT_VALIDATION"), True)

        policy_env = env.get("LISTSERVER_HAS_MORE_POLICY")
        if policy_env is not None and "has_more_policy" not in overrides:
            try:
                config_kwargs["has_more_policy"] = HasMorePolicy(policy_env.strip().lower())
            except ValueError as exc:
                choices = ", ".join(p.value for p in HasMorePolicy)
                raise ListConfigError(f"LISTSERVER_HAS_MORE_POLICY must be one of {choices}, got {policy_env!r}") from exc

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
