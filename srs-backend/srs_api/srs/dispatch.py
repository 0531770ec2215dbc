from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping, Optional

from .models import ProjectionType

logger = logging.getLogger(__name__)

_T = ProjectionType

# EPSG coordinate operation method code -> projection kind
PROJECTION_METHODS: Mapping[int, ProjectionType] = MappingProxyType({
    1024: _T.POPULAR_VISUALISATION_PSEUDO_MERCATOR,
    1027: _T.LAMBERT_AZIMUTHAL_EQUAL_AREA_SPHERICAL,
    1028: _T.EQUIDISTANT_CYLINDRICAL,
    1029: _T.EQUIDISTANT_CYLINDRICAL_SPHERICAL,
    1041: _T.KROVAK_NORTH_ORIENTATED,
    1042: _T.KROVAK_MODIFIED,
    1043: _T.KROVAK_MODIFIED_NORTH_ORIENTATED,
    1051: _T.LAMBERT_CONIC_CONFORMAL_2SP_MICHIGAN,
    1052: _T.COLOMBIA_URBAN,
    9801: _T.LAMBERT_CONIC_CONFORMAL_1SP,
    9802: _T.LAMBERT_CONIC_CONFORMAL_2SP,
    9803: _T.LAMBERT_CONIC_CONFORMAL_2SP_BELGIUM,
    9804: _T.MERCATOR_VARIANT_A,
    9805: _T.MERCATOR_VARIANT_B,
    9806: _T.CASSINI_SOLDNER,
    9807: _T.TRANSVERSE_MERCATOR,
    9808: _T.TRANSVERSE_MERCATOR_SOUTH_ORIENTATED,
    9809: _T.OBLIQUE_STEREOGRAPHIC,
    9810: _T.POLAR_STEREOGRAPHIC_VARIANT_A,
    9811: _T.NEW_ZEALAND_MAP_GRID,
    9812: _T.HOTINE_OBLIQUE_MERCATOR_VARIANT_A,
    9813: _T.LABORDE_OBLIQUE_MERCATOR,
    9815: _T.HOTINE_OBLIQUE_MERCATOR_VARIANT_B,
    9816: _T.TUNISIA_MINING_GRID,
    9817: _T.LAMBERT_CONIC_NEAR_CONFORMAL,
    9818: _T.AMERICAN_POLYCONIC,
    9819: _T.KROVAK,
    9820: _T.LAMBERT_AZIMUTHAL_EQUAL_AREA,
    9822: _T.ALBERS_EQUAL_AREA,
    9824: _T.TRANSVERSE_MERCATOR_ZONED_GRID_SYSTEM,
    9826: _T.LAMBERT_CONIC_CONFORMAL_WEST_ORIENTATED,
    9828: _T.BONNE_SOUTH_ORIENTATED,
    9829: _T.POLAR_STEREOGRAPHIC_VARIANT_B,
    9830: _T.POLAR_STEREOGRAPHIC_VARIANT_C,
    9831: _T.GUAM_PROJECTION,
    9832: _T.MODIFIED_AZIMUTHAL_EQUIDISTANT,
    9833: _T.HYPERBOLIC_CASSINI_SOLDNER,
    9834: _T.LAMBERT_CYLINDRICAL_EQUAL_AREA_SPHERICAL,
    9835: _T.LAMBERT_CYLINDRICAL_EQUAL_AREA,
})

_METHOD_CODES = {kind: code for code, kind in PROJECTION_METHODS.items()}


def select_projection_type(authority_name: Optional[str], authority_code: Optional[str]) -> ProjectionType:
    """Map a PROJECTION clause's authority to a projection kind.

    Missing, non-EPSG, non-numeric or unknown codes give UNKNOWN.
    """
    if not authority_name or authority_name.lower() != "epsg":
        return ProjectionType.UNKNOWN
    try:
        code = int(authority_code or "")
    except ValueError:
        return ProjectionType.UNKNOWN
    kind = PROJECTION_METHODS.get(code, ProjectionType.UNKNOWN)
    logger.debug("projection method EPSG:%s -> %s", code, kind.name)
    return kind


def method_code(projection_type: ProjectionType) -> int:
    """EPSG method code of a projection kind, 0 for UNKNOWN."""
    return _METHOD_CODES.get(projection_type, 0)


__all__ = ["PROJECTION_METHODS", "select_projection_type", "method_code"]
