from __future__ import annotations

import logging
from typing import Callable, Optional, Union

from wkt.reader import read_wkt
from wkt.tree import CoordinateSystem, GeographicCS, ProjectedCS

from .builders import build_geographic, build_projected
from .errors import MissingParameterError, ParseError
from .models import GeographicSrs, ProjectedSrs

logger = logging.getLogger(__name__)

Tokenizer = Callable[[int, str], CoordinateSystem]
SpatialReferenceSystem = Union[GeographicSrs, ProjectedSrs]


def parse_wkt(
    srid: int,
    text: Optional[str],
    begin: int = 0,
    end: Optional[int] = None,
    tokenizer: Tokenizer = read_wkt,
) -> SpatialReferenceSystem:
    """Build an SRS record from the definition ``text[begin:end]``.

    ``tokenizer`` turns the text into a parse tree; the default is the
    bundled WKT reader. An empty or missing definition raises ParseError
    without calling it.

    Raises ParseError or MissingParameterError. Nothing is returned on
    failure.
    """
    if text is None:
        raise ParseError(srid, "empty definition")
    definition = text[begin:end]
    if not definition:
        raise ParseError(srid, "empty definition")

    try:
        cs = tokenizer(srid, definition)
        if isinstance(cs, ProjectedCS):
            return build_projected(srid, cs)
        if isinstance(cs, GeographicCS):
            return build_geographic(srid, cs)
    except ParseError as e:
        logger.info("srs %s: parse error: %s", srid, e.detail)
        raise
    except MissingParameterError as e:
        logger.info(
            "srs %s: missing parameter %s (EPSG:%s)", srid, e.parameter_name, e.epsg_code
        )
        raise
    raise ParseError(srid, f"tokenizer returned {type(cs).__name__}")


__all__ = ["parse_wkt", "SpatialReferenceSystem", "Tokenizer"]
