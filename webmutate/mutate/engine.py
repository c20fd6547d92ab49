"""
Mutation generation.

Expands one input vector into every (field x format) variant carrying an
injection string, plus the method-switched counterpart of each variant and,
optionally, a parameter flip. Variants with an identical transmitted state are
emitted once.

Output order: fields in insertion order, then formats in the given order,
each mutation immediately followed by its switched counterpart; the
parameter flip (and its counterpart) comes last.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Union

from ..config import get_config
from ..contracts.enums import FormatFlag
from ..contracts.options import MutationOptions
from ..filler import InputFiller
from ..vectors.base import InputVector
from .dedup import DedupSet
from .format import build_injection
from .observer import MutationObserver, NullObserver
from .switcher import switch_method

logger = logging.getLogger(__name__)

# Pseudo input name of parameter-flip mutations.
PARAMETER_FLIP = "Parameter flip"

Filler = Callable[[Mapping[str, str]], Mapping[str, str]]
MethodPolicy = Callable[[], bool]
OptionsLike = Union[MutationOptions, Mapping[str, Any], None]


def audit_with_both_methods() -> bool:
    return get_config().audit.with_both_http_methods


def fill_from_config(fields: Mapping[str, str]) -> Dict[str, str]:
    return InputFiller.from_config().fill(fields)


def _mutate_input(
    elem: InputVector,
    name: str,
    seed: str,
    fields: Dict[str, str],
    format: FormatFlag,
) -> None:
    elem.seed = seed
    elem.affected_input_name = name
    elem.fields = fields
    elem.format = format


def _flip_input(elem: InputVector, injection_str: str, original_seed: Optional[str]) -> None:
    elem.affected_input_name = PARAMETER_FLIP
    elem[injection_str] = original_seed or ""
    elem.seed = injection_str
    # The payload becomes a field name verbatim.
    elem.format = FormatFlag.STRAIGHT


class MutationEngine:
    """
    ``filler`` supplies default values for the APPEND format and the base
    values of each mutation. ``both_methods`` answers "audit with both HTTP
    methods?" and is only consulted when ``respect_method`` is unset.
    """

    def __init__(
        self,
        filler: Optional[Filler] = None,
        both_methods: Optional[MethodPolicy] = None,
        observer: Optional[MutationObserver] = None,
    ) -> None:
        self.filler = filler or fill_from_config
        self.both_methods = both_methods or audit_with_both_methods
        self.observer = observer or NullObserver()

    def generate(
        self,
        vector: InputVector,
        injection_str: str,
        options: OptionsLike = None,
    ) -> Iterator[InputVector]:
        """
        Lazily yield mutations of ``vector``. Options are validated here, at
        call time, so configuration errors surface before anything is cloned.
        """
        opts = MutationOptions.coerce(options)

        if not vector.fields:
            return iter(())

        respect_method = opts.respect_method
        if respect_method is None:
            respect_method = not self.both_methods()

        return self._each_mutation(vector, str(injection_str), opts, respect_method)

    def collect(
        self,
        vector: InputVector,
        injection_str: str,
        options: OptionsLike = None,
    ) -> List[InputVector]:
        return list(self.generate(vector, injection_str, options))

    def _each_mutation(
        self,
        vector: InputVector,
        injection_str: str,
        opts: MutationOptions,
        respect_method: bool,
    ) -> Iterator[InputVector]:
        self._notify("on_formatting_summary", opts)

        inputs = dict(vector.fields)
        filled = dict(self.filler(inputs))
        generated = DedupSet()

        for k in inputs:
            # Don't audit parameter flips.
            if inputs[k] == vector.seed or k in vector.immutables:
                continue

            for format in opts.format:
                injected = build_injection(injection_str, filled.get(k), format)

                elem = vector.clone()
                fields = {**filled, k: injected}
                if not self._try_input(elem, k, partial(_mutate_input, elem, k, injection_str, fields, format)):
                    continue

                yield from self._emit(elem, generated, respect_method)

        if not opts.param_flip:
            return

        elem = vector.clone()
        if not self._try_input(elem, PARAMETER_FLIP, partial(_flip_input, elem, injection_str, vector.seed)):
            return

        yield from self._emit(elem, generated, respect_method)

    def _emit(self, elem: InputVector, generated: DedupSet, respect_method: bool) -> Iterator[InputVector]:
        # Taken before yielding: the consumer may change what it receives.
        fresh = elem not in generated
        generated.add(elem)

        celem = None if respect_method else switch_method(elem)

        if fresh:
            self._notify("on_candidate", elem)
            yield elem

        if celem is None:
            return

        if celem not in generated:
            generated.add(celem)
            self._notify("on_candidate", celem)
            yield celem

    def _try_input(self, elem: InputVector, name: str, apply: Callable[[], None]) -> bool:
        try:
            apply()
        except Exception as e:
            logger.debug("Dropping mutation of %r for %s: %s", name, elem.target, e)
            return False
        return True

    def _notify(self, hook: str, arg: Any) -> None:
        try:
            getattr(self.observer, hook)(arg)
        except Exception as e:
            # Prevent one observer from breaking generation
            logger.warning("Observer %s.%s failed: %s", type(self.observer).__name__, hook, e)


def generate(
    vector: InputVector,
    injection_str: str,
    options: OptionsLike = None,
    **engine_kwargs: Any,
) -> Iterator[InputVector]:
    return MutationEngine(**engine_kwargs).generate(vector, injection_str, options)


def collect(
    vector: InputVector,
    injection_str: str,
    options: OptionsLike = None,
    **engine_kwargs: Any,
) -> List[InputVector]:
    return MutationEngine(**engine_kwargs).collect(vector, injection_str, options)
