"""
Injection string formatting.

``build_injection`` wraps a payload according to a ``FormatFlag``
combination. It is total over non-negative integers: bits it does not know
about are ignored.
"""

from __future__ import annotations

from typing import List, Optional

from ..contracts.enums import FormatFlag

_DESCRIPTIONS = (
    (FormatFlag.NULL, "null character termination"),
    (FormatFlag.APPEND, "append to default value"),
    (FormatFlag.SEMICOLON, "semicolon prefix"),
    (FormatFlag.STRAIGHT, "straight, leave as is"),
)


def build_injection(injection_str: str, default_str: Optional[str], format: int) -> str:
    semicolon = append = null = ""

    if format & FormatFlag.NULL:
        null = "\0"
    if format & FormatFlag.SEMICOLON:
        semicolon = ";"
    if format & FormatFlag.APPEND:
        append = default_str or ""
    if format & FormatFlag.STRAIGHT:
        semicolon = append = null = ""

    return f"{semicolon}{append}{injection_str}{null}"


def describe_format(format: int) -> str:
    """e.g. ``'Null character termination (NULL) and append to default value (APPEND). [Format mask: 6]'``"""
    parts: List[str] = []
    for flag, text in _DESCRIPTIONS:
        if format & flag:
            parts.append(f"{text} ({flag.name})")

    msg = " and ".join(parts) or "no formatting"
    return f"{msg[0].upper()}{msg[1:]}. [Format mask: {int(format)}]"
