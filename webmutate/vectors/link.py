from __future__ import annotations

from urllib.parse import parse_qsl, urlparse

import httpx

from ..contracts.enums import VectorKind, WebMethod
from .base import InputVector


class LinkVector(InputVector):
    """Inputs carried in the query string of a URL."""

    kind = VectorKind.LINK
    query_based = True

    @classmethod
    def from_url(cls, url: str) -> "LinkVector":
        parsed = urlparse(url)
        return cls(url, dict(parse_qsl(parsed.query, keep_blank_values=True)), WebMethod.GET)

    def build_request(self) -> httpx.Request:
        base = self.target.split("?", 1)[0]
        if self.method == WebMethod.GET:
            return httpx.Request("GET", base, params=dict(self._fields))
        return httpx.Request(self.method.value, self.target, data=dict(self._fields))
