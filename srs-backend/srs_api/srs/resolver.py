from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Sequence

from wkt.tree import Parameter

from .errors import MissingParameterError
from .params import ParameterSpec

logger = logging.getLogger(__name__)

# Marks a slot no parameter has filled yet. Zero is a valid value for many
# parameters (false easting, latitude of origin, ...).
_UNSET = object()


def _same(a: str | None, b: str | None) -> bool:
    if not a or not b:
        return False
    return a.lower() == b.lower()


def _is_epsg(param: Parameter) -> bool:
    return param.authority is not None and _same(param.authority.name, "EPSG")


def resolve_parameters(
    srid: int,
    parameters: Iterable[Parameter],
    required: Sequence[ParameterSpec],
) -> Dict[str, float]:
    """Fill the ``required`` parameter slots from parse tree parameters.

    A parameter with an EPSG authority is matched by code only. Any other
    parameter is matched case-insensitively by name, then by alias. A
    parameter may fill several slots, and when several parameters match
    the same slot the last one wins.

    Raises MissingParameterError for the first slot left unfilled.
    """
    values: List[object] = [_UNSET] * len(required)

    for param in parameters:
        by_code = _is_epsg(param)
        code = param.authority.code if by_code and param.authority else ""
        for idx, spec in enumerate(required):
            if by_code:
                if code == str(spec.epsg_code):
                    values[idx] = param.value
            elif _same(param.name, spec.name) or _same(param.name, spec.alias):
                values[idx] = param.value

    resolved: Dict[str, float] = {}
    for spec, value in zip(required, values):
        if value is _UNSET:
            logger.debug(
                "srs %s: parameter %s (EPSG:%s) not found", srid, spec.name, spec.epsg_code
            )
            raise MissingParameterError(srid, spec.name, spec.epsg_code)
        resolved[spec.name] = float(value)  # type: ignore[arg-type]
    return resolved


__all__ = ["resolve_parameters"]
