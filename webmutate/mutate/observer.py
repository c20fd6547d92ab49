from __future__ import annotations

import logging
from typing import Protocol

from ..contracts.options import MutationOptions
from ..vectors.base import InputVector
from .format import describe_format

logger = logging.getLogger(__name__)


class MutationObserver(Protocol):
    """Extension points of a generation call. Must not influence its output."""

    def on_formatting_summary(self, options: MutationOptions) -> None: ...

    def on_candidate(self, vector: InputVector) -> None: ...


class NullObserver:
    def on_formatting_summary(self, options: MutationOptions) -> None:
        pass

    def on_candidate(self, vector: InputVector) -> None:
        pass


class LoggingObserver:
    """Writes the formatting summary and every emitted mutation to a logger at DEBUG."""

    def __init__(self, log: logging.Logger = logger, level: int = logging.DEBUG) -> None:
        self._log = log
        self._level = level

    def on_formatting_summary(self, options: MutationOptions) -> None:
        if not self._log.isEnabledFor(self._level):
            return

        self._log.log(self._level, "Formatting set to:")
        for format in options.format:
            self._log.log(self._level, "|----> %s", describe_format(format))

    def on_candidate(self, vector: InputVector) -> None:
        if not self._log.isEnabledFor(self._level):
            return

        self._log.log(self._level, "|--> Auditing: %s", vector.affected_input_name)
        self._log.log(self._level, "|--> Inputs: ")
        for k, v in vector.fields.items():
            self._log.log(self._level, "|----> %r => %r", k, v)
