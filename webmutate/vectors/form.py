from __future__ import annotations

import httpx

from ..contracts.enums import VectorKind, WebMethod
from .base import InputVector


class FormVector(InputVector):
    """Inputs of an HTML form, sent to its action URL."""

    kind = VectorKind.FORM

    def build_request(self) -> httpx.Request:
        if self.method == WebMethod.GET:
            return httpx.Request("GET", self.target, params=dict(self._fields))
        return httpx.Request(self.method.value, self.target, data=dict(self._fields))
