from __future__ import annotations

from typing import Tuple

import httpx

from ..contracts.errors import InputRejected
from ..contracts.enums import VectorKind
from .base import InputVector

# Characters that cannot survive inside an HTTP/1.1 header line.
_FORBIDDEN = ("\r", "\n", "\0")


class HeaderVector(InputVector):
    kind = VectorKind.HEADER

    def validate_input(self, name: str, value: str) -> Tuple[str, str]:
        if not name:
            raise InputRejected("header name must not be empty")
        for ch in _FORBIDDEN:
            if ch in name or ch in value:
                raise InputRejected(f"header {name!r} contains {ch!r}")
        return name, value

    def build_request(self) -> httpx.Request:
        return httpx.Request(self.method.value, self.target, headers=dict(self._fields))
