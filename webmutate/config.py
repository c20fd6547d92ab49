# ============================================================================
# webmutate/config.py
# Audit and Input Configuration
# ============================================================================
#
# PURPOSE:
# Process-wide settings consulted at the boundary of the mutation engine:
# whether audits run against both HTTP methods, how empty inputs get filled,
# and how logging is set up.
#
# The engine never reads these from inside its loop; callers (or the engine's
# default resolvers) read them once per generation call.
#
# ============================================================================

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional

logger = logging.getLogger(__name__)


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() == "true"


@dataclass(frozen=True)
class AuditConfig:
    # Also audit each input with the other HTTP method (GET <-> POST).
    with_both_http_methods: bool = False


@dataclass(frozen=True)
class InputConfig:
    # Value used for empty inputs whose name matches no known pattern.
    default_value: str = "1"
    # Overwrite non-empty values too.
    force: bool = False


@dataclass(frozen=True)
class LogConfig:
    level: str = "INFO"
    format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@dataclass
class MutateConfig:
    audit: AuditConfig = field(default_factory=AuditConfig)
    input: InputConfig = field(default_factory=InputConfig)
    log: LogConfig = field(default_factory=LogConfig)
    debug: bool = False

    @classmethod
    def from_env(cls) -> "MutateConfig":
        audit = AuditConfig(
            with_both_http_methods=_env_flag("WEBMUTATE_AUDIT_BOTH_METHODS"),
        )

        input_cfg = InputConfig(
            default_value=os.getenv("WEBMUTATE_INPUT_DEFAULT", "1"),
            force=_env_flag("WEBMUTATE_INPUT_FORCE"),
        )

        debug = _env_flag("WEBMUTATE_DEBUG")
        log = LogConfig(
            level=os.getenv("WEBMUTATE_LOG_LEVEL", "DEBUG" if debug else "INFO"),
        )

        return cls(audit=audit, input=input_cfg, log=log, debug=debug)


_config: Optional[MutateConfig] = None


def get_config() -> MutateConfig:
    global _config
    if _config is None:
        _config = MutateConfig.from_env()
    return _config


def set_config(config: MutateConfig) -> None:
    global _config
    _config = config


def reset_config() -> None:
    """Drop the cached config so the next get_config() re-reads the environment."""
    global _config
    _config = None


def setup_logging(config: Optional[MutateConfig] = None) -> None:
    cfg = config or get_config()

    handlers: List[logging.Handler] = [logging.StreamHandler()]

    level = getattr(logging, cfg.log.level.upper(), None)
    if not isinstance(level, int):
        logger.warning("Unknown log level %r, falling back to INFO", cfg.log.level)
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format=cfg.log.format,
        handlers=handlers,
        force=True,
    )
