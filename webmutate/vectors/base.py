from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Any, ClassVar, Dict, FrozenSet, Mapping, Optional, Set, Tuple

import httpx

from ..contracts.enums import FormatFlag, VectorKind, WebMethod
from ..contracts.errors import InputRejected

CanonicalKey = Tuple[str, str, FrozenSet[Tuple[str, str]]]


class InputVector(ABC):
    """
    A named field -> value mapping plus the target and HTTP method it is sent
    with. One instance represents one testable unit (a link, a form, the
    cookies or the headers of a page).

    Mutations produced from a vector carry three pieces of bookkeeping:
    ``affected_input_name``, ``seed`` and ``format``. None of them take part
    in the canonical key.
    """

    kind: ClassVar[VectorKind]
    # Transmitted solely through the target's query component.
    query_based: ClassVar[bool] = False

    def __init__(
        self,
        target: str,
        fields: Optional[Mapping[str, str]] = None,
        method: "str | WebMethod" = WebMethod.GET,
    ) -> None:
        self.target = target
        self.method = method
        self._fields: Dict[str, str] = {}
        self.fields = fields or {}
        self._original_fields: Dict[str, str] = dict(self._fields)

        self._affected_input_name: Optional[str] = None
        self._seed: Optional[str] = None
        self.format: Optional[FormatFlag] = None
        self._immutables: Optional[Set[str]] = None

    # ------------------------------------------------------------------
    # Transmitted state
    # ------------------------------------------------------------------

    @property
    def method(self) -> WebMethod:
        return self._method

    @method.setter
    def method(self, value: "str | WebMethod") -> None:
        self._method = WebMethod.parse(value)

    @property
    def fields(self) -> Mapping[str, str]:
        return MappingProxyType(self._fields)

    @fields.setter
    def fields(self, value: Mapping[str, str]) -> None:
        # Validate everything first so a rejected value leaves us untouched.
        fields: Dict[str, str] = {}
        for name, v in value.items():
            name, v = self.validate_input(str(name), "" if v is None else str(v))
            fields[name] = v
        self._fields = fields

    def __getitem__(self, name: str) -> str:
        return self._fields[name]

    def __setitem__(self, name: str, value: Optional[str]) -> None:
        name, value = self.validate_input(str(name), "" if value is None else str(value))
        self._fields[name] = value

    def validate_input(self, name: str, value: str) -> Tuple[str, str]:
        """
        Hook for concrete kinds to normalize or refuse a field.
        Raise ``InputRejected`` to refuse it.
        """
        return name, value

    def is_query_based_kind(self) -> bool:
        return self.query_based

    def canonical_key(self) -> CanonicalKey:
        return (self.target, self.method.value, frozenset(self._fields.items()))

    # ------------------------------------------------------------------
    # Mutation bookkeeping
    # ------------------------------------------------------------------

    @property
    def affected_input_name(self) -> Optional[str]:
        """Name of the mutated field, ``None`` for an unmutated vector."""
        return self._affected_input_name

    @affected_input_name.setter
    def affected_input_name(self, value: Optional[str]) -> None:
        self._affected_input_name = None if value is None else str(value)

    @property
    def affected_input_value(self) -> Optional[str]:
        if self._affected_input_name is None:
            return None
        return self._fields.get(self._affected_input_name, "")

    @affected_input_value.setter
    def affected_input_value(self, value: str) -> None:
        if self._affected_input_name is None:
            raise InputRejected("vector is not a mutation; there is no affected input to set")
        self[self._affected_input_name] = value

    @property
    def seed(self) -> Optional[str]:
        """Injection string this mutation was derived from."""
        return self._seed

    @seed.setter
    def seed(self, value: Optional[str]) -> None:
        self._seed = None if value is None else str(value)

    @property
    def is_mutation(self) -> bool:
        return self._affected_input_name is not None

    @property
    def immutables(self) -> Set[str]:
        """Names of fields that are never picked as mutation targets."""
        if self._immutables is None:
            self._immutables = set()
        return self._immutables

    def reset(self) -> "InputVector":
        """Restore the fields this vector was created with and drop mutation state."""
        self._fields = dict(self._original_fields)
        self._affected_input_name = None
        self._seed = None
        self.format = None
        return self

    # ------------------------------------------------------------------
    # Copying and rendering
    # ------------------------------------------------------------------

    def clone(self) -> "InputVector":
        other = copy.copy(self)
        other._fields = dict(self._fields)
        other._original_fields = dict(self._original_fields)
        other._immutables = set(self._immutables) if self._immutables is not None else None
        return other

    def describe(self) -> Dict[str, Any]:
        h: Dict[str, Any] = {
            "type": self.kind.value,
            "target": self.target,
            "method": self.method.value,
            "fields": dict(self._fields),
        }

        if self.is_mutation:
            h["affected_input_name"] = self.affected_input_name
            h["affected_input_value"] = self.affected_input_value
            h["seed"] = self.seed

        return h

    @abstractmethod
    def build_request(self) -> httpx.Request:
        """Render the vector as the request it would be transmitted with. No I/O."""

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(target={self.target!r}, method={self.method.value}, "
            f"fields={self._fields!r}, affected_input_name={self._affected_input_name!r})"
        )
