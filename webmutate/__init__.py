"""
webmutate: mutation generation for web input vectors.

Given a link, form, cookie jar or header set and an injection string, yields a
deterministic, deduplicated stream of variants with the payload injected into
one field at a time.
"""

from .contracts.enums import FormatFlag, VectorKind, WebMethod
from .contracts.errors import ConfigurationError, InputRejected, MutationEngineError
from .contracts.options import MutationOptions
from .filler import InputFiller
from .mutate import (
    PARAMETER_FLIP,
    DedupSet,
    LoggingObserver,
    MutationEngine,
    NullObserver,
    build_injection,
    collect,
    generate,
    switch_method,
)
from .vectors import CookieVector, FormVector, HeaderVector, InputVector, LinkVector

__all__ = [
    "ConfigurationError",
    "CookieVector",
    "DedupSet",
    "FormVector",
    "FormatFlag",
    "HeaderVector",
    "InputFiller",
    "InputRejected",
    "InputVector",
    "LinkVector",
    "LoggingObserver",
    "MutationEngine",
    "MutationEngineError",
    "MutationOptions",
    "NullObserver",
    "PARAMETER_FLIP",
    "VectorKind",
    "WebMethod",
    "build_injection",
    "collect",
    "generate",
    "switch_method",
]
