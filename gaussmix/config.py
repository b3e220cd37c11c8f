# config.py
"""
Numerical configuration for gaussmix.

Settings are resolved in layers:
1. Defaults declared on `NumericalConfig`
2. Environment variables (``GAUSSMIX_<FIELD>``), read once at import time
3. Runtime modifications through `set_config`

The numerical routines only ever read the active configuration via
`get_config()`; they never modify it.
"""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass, fields, replace
from typing import Any

from .exceptions import PreconditionError

logger = logging.getLogger(__name__)

CONFIG_ENV_PREFIX = "GAUSSMIX_"


@dataclass(frozen=True)
class NumericalConfig:
    """
    Numerical settings for the linear-algebra provider.

    Attributes:
        cholesky_jitter: Diagonal jitter added before a single retry when the
            first Cholesky factorization fails. 0 disables the retry.
        symmetrize: If True, use (C + C.T)/2 before Cholesky factorization.
        det_tol: Determinants less than or equal to this value are treated
            as singular.
    """
    cholesky_jitter: float = 0.0
    symmetrize: bool = False
    det_tol: float = 0.0

    def __post_init__(self) -> None:
        for name in ("cholesky_jitter", "det_tol"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise PreconditionError(f"{name} must be a real number.", {"value": value})
            if not math.isfinite(value) or value < 0:
                raise PreconditionError(f"{name} must be finite and non-negative.", {"value": value})
        if not isinstance(self.symmetrize, bool):
            raise PreconditionError("symmetrize must be a bool.", {"value": self.symmetrize})


def _parse_env_value(name: str, raw: str, default: Any) -> Any:
    if isinstance(default, bool):
        lowered = raw.strip().lower()
        if lowered in ("1", "true", "yes", "on"):
            return True
        if lowered in ("0", "false", "no", "off"):
            return False
        raise PreconditionError(f"Invalid boolean for {CONFIG_ENV_PREFIX}{name.upper()}: {raw!r}")
    try:
        return float(raw)
    except ValueError as e:
        raise PreconditionError(f"Invalid number for {CONFIG_ENV_PREFIX}{name.upper()}: {raw!r}") from e


def config_from_env(environ: dict[str, str] | None = None) -> NumericalConfig:
    """Build a config from defaults overridden by ``GAUSSMIX_*`` variables."""
    environ = os.environ if environ is None else environ
    defaults = NumericalConfig()
    overrides = {}
    for f in fields(NumericalConfig):
        raw = environ.get(f"{CONFIG_ENV_PREFIX}{f.name.upper()}")
        if raw is not None:
            overrides[f.name] = _parse_env_value(f.name, raw, getattr(defaults, f.name))
            logger.debug("Config override from environment: %s=%r", f.name, overrides[f.name])
    return replace(defaults, **overrides)


_config: NumericalConfig = config_from_env()


def get_config() -> NumericalConfig:
    """Return the active configuration."""
    return _config


def set_config(**kwargs: Any) -> NumericalConfig:
    """Replace fields of the active configuration and return the new one."""
    global _config
    known = {f.name for f in fields(NumericalConfig)}
    unknown = set(kwargs) - known
    if unknown:
        raise PreconditionError(f"Unknown configuration option(s): {sorted(unknown)}")
    _config = replace(_config, **kwargs)
    logger.debug("Configuration updated: %r", _config)
    return _config


def reset_config() -> NumericalConfig:
    """Restore defaults (including environment overrides)."""
    global _config
    _config = config_from_env()
    return _config
