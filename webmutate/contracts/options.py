from __future__ import annotations

from typing import Any, List, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .enums import FormatFlag
from .errors import ConfigurationError


def default_formats() -> Tuple[FormatFlag, ...]:
    return (
        FormatFlag.STRAIGHT,
        FormatFlag.APPEND,
        FormatFlag.NULL,
        FormatFlag.APPEND | FormatFlag.NULL,
    )


class MutationOptions(BaseModel):
    """
    Formatting and mutation options for a single generation call.

    ``respect_method``:
      * ``None``  derive from the audit policy (negation of "with both HTTP methods").
      * ``True``  don't create counterparts with the other method.
      * ``False`` create counterparts with the other method.

    ``skip`` and ``skip_original`` are carried for concrete vector types; the
    engine itself does not interpret them.

    Invalid values raise ``ConfigurationError`` whether the options are built
    directly or through ``coerce()``.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    format: Tuple[FormatFlag, ...] = Field(default_factory=default_formats)
    param_flip: bool = False
    respect_method: Optional[bool] = None
    skip: Tuple[str, ...] = ()
    skip_original: bool = False

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid mutation options: {e}") from e

    @field_validator("format", mode="plain")
    @classmethod
    def validate_format(cls, v: Any) -> Tuple[FormatFlag, ...]:
        if not isinstance(v, (list, tuple)):
            raise ValueError("format must be a list of flag combinations")

        known = FormatFlag.all_bits()
        flags: List[FormatFlag] = []
        for item in v:
            if isinstance(item, bool) or not isinstance(item, int):
                raise ValueError(f"format entries must be integers, got {item!r}")
            if item < 0 or item & ~known:
                raise ValueError(f"unrecognized format bits in {item!r}")
            flags.append(FormatFlag(item))
        if not flags:
            raise ValueError("format must hold at least one flag combination")
        return tuple(flags)

    @classmethod
    def coerce(cls, value: Union["MutationOptions", Mapping[str, Any], None] = None) -> "MutationOptions":
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        try:
            return cls.model_validate(dict(value))
        except ValidationError as e:
            raise ConfigurationError(f"Invalid mutation options: {e}") from e
        except TypeError as e:
            raise ConfigurationError(f"Mutation options must be a mapping, got {type(value).__name__}") from e
