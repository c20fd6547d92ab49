from __future__ import annotations


class MutationEngineError(Exception):
    """Base exception for the mutation engine."""


class ConfigurationError(MutationEngineError):
    """Raised at call entry when mutation options cannot be honored."""


class InputRejected(MutationEngineError, ValueError):
    """Raised by an input vector that refuses a field name or value."""
