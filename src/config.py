"""Configuration and environment helpers for the project.

Provides small helpers to read typed environment variables and a resolver
that assembles one immutable DokployConfig from defaults, the environment
and caller-supplied overrides. The config is built once at startup and
passed into every client and tool; handlers never read os.environ.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional
from urllib.parse import urlparse

from core.errors import ConfigurationError

DEFAULT_BASE_URL = "https://dok.bish.one"
DEFAULT_TIMEOUT = 30.0

AUTH_SCHEMES = ("api-key", "bearer")
DELETE_VERBS = ("remove", "delete")
MCP_TRANSPORTS = ("stdio", "sse", "streamable-http")


_TRUE = {"1", "true", "yes", "y", "on"}
_FALSE = {"0", "false", "no", "n", "off", ""}


def _parse_bool(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        raw = value.strip().lower()
        if raw in _TRUE:
            return True
        if raw in _FALSE:
            return False
    raise ConfigurationError(f"{name} must be a boolean, got {value!r}")


def _parse_float(name: str, value: Any) -> float:
    if isinstance(value, bool):
        raise ConfigurationError(f"{name} must be a number, got {value!r}")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            pass
    raise ConfigurationError(f"{name} must be a number, got {value!r}")


def _parse_str(name: str, value: Any) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{name} must be a string, got {type(value).__name__}")
    return value.strip()


def _env_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUE


def _env_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None:
        return default
    return _parse_float(name, raw)


def _env_str(env: Mapping[str, str], name: str, default: str) -> str:
    raw = (env.get(name) or "").strip()
    return raw or default


@dataclass(frozen=True)
class DokployConfig:
    """Connection parameters for one Dokploy instance.

    - base_url: instance root, without the trailing "/api"
    - api_key: credential sent in a single static header
    - debug: log outbound requests and errors
    - auth_scheme: "api-key" (x-api-key header) or "bearer" (Authorization)
    - delete_verb: verb used by application/database deletion paths
    """

    base_url: str
    api_key: str
    debug: bool = False
    auth_scheme: str = "api-key"
    delete_verb: str = "remove"
    timeout: float = DEFAULT_TIMEOUT
    verify: bool = True
    transport: str = "stdio"

    @property
    def api_url(self) -> str:
        return f"{self.base_url}/api"

    def __repr__(self) -> str:
        # Keep the credential out of logs and tracebacks
        return (
            f"DokployConfig(base_url={self.base_url!r}, api_key='***', debug={self.debug}, "
            f"auth_scheme={self.auth_scheme!r}, delete_verb={self.delete_verb!r}, "
            f"timeout={self.timeout}, verify={self.verify}, transport={self.transport!r})"
        )


_OVERRIDE_PARSERS = {
    "base_url": _parse_str,
    "api_key": _parse_str,
    "debug": _parse_bool,
    "auth_scheme": lambda name, value: _parse_str(name, value).lower(),
    "delete_verb": lambda name, value: _parse_str(name, value).lower(),
    "timeout": _parse_float,
    "verify": _parse_bool,
    "transport": lambda name, value: _parse_str(name, value).lower(),
}


def _validate(config: DokployConfig) -> DokployConfig:
    parsed = urlparse(config.base_url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigurationError(f"Invalid Dokploy URL: {config.base_url!r}")
    if not config.api_key:
        raise ConfigurationError("DOKPLOY_API_KEY is required")
    if config.auth_scheme not in AUTH_SCHEMES:
        raise ConfigurationError(f"Unsupported auth scheme: {config.auth_scheme!r}")
    if config.delete_verb not in DELETE_VERBS:
        raise ConfigurationError(f"Unsupported delete verb: {config.delete_verb!r}")
    if config.transport not in MCP_TRANSPORTS:
        raise ConfigurationError(f"Unsupported MCP transport: {config.transport!r}")
    if config.timeout <= 0:
        raise ConfigurationError("DOKPLOY_TIMEOUT must be positive")
    return config


def load_config(
    overrides: Optional[Mapping[str, Any]] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> DokployConfig:
    """Resolve configuration: defaults < environment < overrides."""
    env = os.environ if environ is None else environ

    config = DokployConfig(
        base_url=_env_str(env, "DOKPLOY_URL", DEFAULT_BASE_URL),
        api_key=_env_str(env, "DOKPLOY_API_KEY", ""),
        debug=_env_bool(env, "DOKPLOY_DEBUG", False),
        auth_scheme=_env_str(env, "DOKPLOY_AUTH_SCHEME", "api-key").lower(),
        delete_verb=_env_str(env, "DOKPLOY_DELETE_VERB", "remove").lower(),
        timeout=_env_float(env, "DOKPLOY_TIMEOUT", DEFAULT_TIMEOUT),
        verify=_env_bool(env, "HTTP_VERIFY", True),
        transport=_env_str(env, "MCP_TRANSPORT", "stdio").lower(),
    )

    if overrides:
        unknown = set(overrides) - set(DokployConfig.__dataclass_fields__)
        if unknown:
            raise ConfigurationError(f"Unknown config option(s): {', '.join(sorted(unknown))}")
        coerced = {key: _OVERRIDE_PARSERS[key](key, value) for key, value in overrides.items()}
        config = replace(config, **coerced)

    config = replace(config, base_url=config.base_url.strip().rstrip("/"))
    return _validate(config)
