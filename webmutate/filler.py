"""
Default-value heuristics for empty inputs.

Given a field mapping, returns a copy where empty values are replaced with
plausible samples chosen by field name (emails for ``*mail*`` fields, numbers
for ``*num*`` fields and so on). The mutation engine uses the result as the
source for APPEND-formatted injections and as the base values of every
mutation.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Tuple

from .config import InputConfig, get_config

# First match wins.
DEFAULT_VALUES: List[Tuple[str, str]] = [
    (r"name", "webmutate_name"),
    (r"user", "webmutate_user"),
    (r"usr", "webmutate_user"),
    (r"pass", "5543!%webmutate_secret"),
    (r"txt", "webmutate_text"),
    (r"num", "132"),
    (r"amount", "100"),
    (r"mail", "webmutate@example.com"),
    (r"account", "12"),
    (r"id", "1"),
]


def _compile(values: List[Tuple[str, str]]) -> List[Tuple[re.Pattern[str], str]]:
    return [(re.compile(p, re.IGNORECASE), v) for p, v in values]


@dataclass
class InputFiller:
    default_value: str = "1"
    force: bool = False
    values: List[Tuple[re.Pattern[str], str]] = field(default_factory=lambda: _compile(DEFAULT_VALUES))

    @classmethod
    def from_config(cls, config: Optional[InputConfig] = None) -> "InputFiller":
        cfg = config or get_config().input
        return cls(default_value=cfg.default_value, force=cfg.force)

    def value_for_name(self, name: str, use_default: bool = True) -> Optional[str]:
        for pattern, value in self.values:
            if pattern.search(name):
                return value
        return self.default_value if use_default else None

    def fill(self, fields: Mapping[str, str]) -> Dict[str, str]:
        """Return a copy of ``fields`` with empty values filled in, order preserved."""
        filled: Dict[str, str] = {}
        for name, value in fields.items():
            if not self.force and value not in (None, ""):
                filled[name] = value
                continue
            filled[name] = self.value_for_name(name)
        return filled

    __call__ = fill
