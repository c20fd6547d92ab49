from __future__ import annotations

from enum import Enum, IntFlag


class WebMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"

    @classmethod
    def parse(cls, value: "str | WebMethod") -> "WebMethod":
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().upper())


class VectorKind(str, Enum):
    LINK = "link"
    FORM = "form"
    COOKIE = "cookie"
    HEADER = "header"


class FormatFlag(IntFlag):
    """
    Bitfield describing how an injection string is wrapped before it is
    placed into a field. Members combine with ``|``.

    STRAIGHT takes precedence over every other bit in the same combination.
    """

    # Leave the injection string as is.
    STRAIGHT = 1 << 0
    # Prepend the field's default value.
    APPEND = 1 << 1
    # Terminate with a null character.
    NULL = 1 << 2
    # Prefix with ';', useful for command injection.
    SEMICOLON = 1 << 3

    @classmethod
    def all_bits(cls) -> int:
        mask = 0
        for member in cls.__members__.values():
            mask |= int(member)
        return mask
