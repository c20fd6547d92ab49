from __future__ import annotations

import httpx

from ..contracts.enums import VectorKind
from .base import InputVector


class CookieVector(InputVector):
    kind = VectorKind.COOKIE

    def cookie_header(self) -> str:
        return "; ".join(f"{k}={v}" for k, v in self._fields.items())

    def build_request(self) -> httpx.Request:
        return httpx.Request(self.method.value, self.target, headers={"Cookie": self.cookie_header()})
