from .dedup import DedupSet, dedup_key
from .engine import PARAMETER_FLIP, MutationEngine, collect, generate
from .format import build_injection, describe_format
from .observer import LoggingObserver, MutationObserver, NullObserver
from .switcher import switch_method

__all__ = [
    "DedupSet",
    "LoggingObserver",
    "MutationEngine",
    "MutationObserver",
    "NullObserver",
    "PARAMETER_FLIP",
    "build_injection",
    "collect",
    "dedup_key",
    "describe_format",
    "generate",
    "switch_method",
]
