from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from .models import ProjectionType

# -----------------------------
# EPSG projection parameter codes
# -----------------------------

# Semantic name per EPSG parameter code. Several codes share a name
# (e.g. 8805/8815/8819 are all "scale_factor"); a projection kind never
# lists two codes with the same name.
PARAMETER_NAMES: Dict[int, str] = {
    1026: "c1",
    1027: "c2",
    1028: "c3",
    1029: "c4",
    1030: "c5",
    1031: "c6",
    1032: "c7",
    1033: "c8",
    1034: "c9",
    1035: "c10",
    1036: "azimuth",
    1038: "ellipsoid_scale_factor",
    1039: "projection_plane_height_at_origin",
    8617: "evaluation_point_ordinate_1",
    8618: "evaluation_point_ordinate_2",
    8801: "latitude_of_origin",
    8802: "central_meridian",
    8805: "scale_factor",
    8806: "false_easting",
    8807: "false_northing",
    8811: "latitude_of_center",
    8812: "longitude_of_center",
    8813: "azimuth",
    8814: "rectified_grid_angle",
    8815: "scale_factor",
    8816: "false_easting",
    8817: "false_northing",
    8818: "pseudo_standard_parallel_1",
    8819: "scale_factor",
    8821: "latitude_of_origin",
    8822: "central_meridian",
    8823: "standard_parallel_1",
    8824: "standard_parallel_2",
    8826: "false_easting",
    8827: "false_northing",
    8830: "initial_longitude",
    8831: "zone_width",
    8832: "standard_parallel",
    8833: "longitude_of_center",
}

# Alternate spellings accepted when matching by name
PARAMETER_ALIASES: Dict[int, str] = {
    8823: "standard_parallel1",
    8824: "standard_parallel2",
}


@dataclass(frozen=True)
class ParameterSpec:
    name: str
    epsg_code: int
    alias: Optional[str] = None


def _specs(*codes: int) -> Tuple[ParameterSpec, ...]:
    return tuple(ParameterSpec(PARAMETER_NAMES[c], c, PARAMETER_ALIASES.get(c)) for c in codes)


# Common parameter groups
_NATURAL_ORIGIN = (8801, 8802)
_FALSE_ORIGIN = (8821, 8822)
_FALSE_EN = (8806, 8807)
_FALSE_EN_AT_FALSE_ORIGIN = (8826, 8827)
_KROVAK = (8811, 8833, 1036, 8818, 8819, 8806, 8807)
_KROVAK_MODIFIED = _KROVAK + (8617, 8618) + tuple(range(1026, 1036))
_TWO_PARALLELS = _FALSE_ORIGIN + (8823, 8824) + _FALSE_EN_AT_FALSE_ORIGIN

_T = ProjectionType

PROJECTION_PARAMETERS: Mapping[ProjectionType, Tuple[ParameterSpec, ...]] = MappingProxyType({
    _T.UNKNOWN: (),
    _T.POPULAR_VISUALISATION_PSEUDO_MERCATOR: _specs(*_NATURAL_ORIGIN, *_FALSE_EN),
    _T.LAMBERT_AZIMUTHAL_EQUAL_AREA_SPHERICAL: _specs(*_NATURAL_ORIGIN, *_FALSE_EN),
    _T.EQUIDISTANT_CYLINDRICAL: _specs(8823, 8802, *_FALSE_EN),
    _T.EQUIDISTANT_CYLINDRICAL_SPHERICAL: _specs(8823, 8802, *_FALSE_EN),
    _T.KROVAK_NORTH_ORIENTATED: _specs(*_KROVAK),
    _T.KROVAK_MODIFIED: _specs(*_KROVAK_MODIFIED),
    _T.KROVAK_MODIFIED_NORTH_ORIENTATED: _specs(*_KROVAK_MODIFIED),
    _T.LAMBERT_CONIC_CONFORMAL_2SP_MICHIGAN: _specs(*_TWO_PARALLELS, 1038),
    _T.COLOMBIA_URBAN: _specs(*_NATURAL_ORIGIN, *_FALSE_EN, 1039),
    _T.LAMBERT_CONIC_CONFORMAL_1SP: _specs(*_NATURAL_ORIGIN, 8805, *_FALSE_EN),
    _T.LAMBERT_CONIC_CONFORMAL_2SP: _specs(*_TWO_PARALLELS),
    _T.LAMBERT_CONIC_CONFORMAL_2SP_BELGIUM: _specs(*_TWO_PARALLELS),
    _T.MERCATOR_VARIANT_A: _specs(*_NATURAL_ORIGIN, 8805, *_FALSE_EN),
    _T.MERCATOR_VARIANT_B: _specs(8823, 8802, *_FALSE_EN),
    _T.CASSINI_SOLDNER: _specs(*_NATURAL_ORIGIN, *_FALSE_EN),
    _T.TRANSVERSE_MERCATOR: _specs(*_NATURAL_ORIGIN, 8805, *_FALSE_EN),
    _T.TRANSVERSE_MERCATOR_SOUTH_ORIENTATED: _specs(*_NATURAL_ORIGIN, 8805, *_FALSE_EN),
    _T.OBLIQUE_STEREOGRAPHIC: _specs(*_NATURAL_ORIGIN, 8805, *_FALSE_EN),
    _T.POLAR_STEREOGRAPHIC_VARIANT_A: _specs(*_NATURAL_ORIGIN, 8805, *_FALSE_EN),
    _T.NEW_ZEALAND_MAP_GRID: _specs(*_NATURAL_ORIGIN, *_FALSE_EN),
    _T.HOTINE_OBLIQUE_MERCATOR_VARIANT_A: _specs(8811, 8812, 8813, 8814, 8815, *_FALSE_EN),
    _T.LABORDE_OBLIQUE_MERCATOR: _specs(8811, 8812, 8813, 8815, *_FALSE_EN),
    _T.HOTINE_OBLIQUE_MERCATOR_VARIANT_B: _specs(8811, 8812, 8813, 8814, 8815, 8816, 8817),
    _T.TUNISIA_MINING_GRID: _specs(*_FALSE_ORIGIN, *_FALSE_EN_AT_FALSE_ORIGIN),
    _T.LAMBERT_CONIC_NEAR_CONFORMAL: _specs(*_NATURAL_ORIGIN, 8805, *_FALSE_EN),
    _T.AMERICAN_POLYCONIC: _specs(*_NATURAL_ORIGIN, *_FALSE_EN),
    _T.KROVAK: _specs(*_KROVAK),
    _T.LAMBERT_AZIMUTHAL_EQUAL_AREA: _specs(*_NATURAL_ORIGIN, *_FALSE_EN),
    _T.ALBERS_EQUAL_AREA: _specs(*_TWO_PARALLELS),
    _T.TRANSVERSE_MERCATOR_ZONED_GRID_SYSTEM: _specs(8801, 8830, 8831, 8805, *_FALSE_EN),
    _T.LAMBERT_CONIC_CONFORMAL_WEST_ORIENTATED: _specs(*_NATURAL_ORIGIN, 8805, *_FALSE_EN),
    _T.BONNE_SOUTH_ORIENTATED: _specs(*_NATURAL_ORIGIN, *_FALSE_EN),
    _T.POLAR_STEREOGRAPHIC_VARIANT_B: _specs(8832, 8833, *_FALSE_EN),
    _T.POLAR_STEREOGRAPHIC_VARIANT_C: _specs(8832, 8833, *_FALSE_EN_AT_FALSE_ORIGIN),
    _T.GUAM_PROJECTION: _specs(*_NATURAL_ORIGIN, *_FALSE_EN),
    _T.MODIFIED_AZIMUTHAL_EQUIDISTANT: _specs(*_NATURAL_ORIGIN, *_FALSE_EN),
    _T.HYPERBOLIC_CASSINI_SOLDNER: _specs(*_NATURAL_ORIGIN, *_FALSE_EN),
    _T.LAMBERT_CYLINDRICAL_EQUAL_AREA_SPHERICAL: _specs(8823, 8802, *_FALSE_EN),
    _T.LAMBERT_CYLINDRICAL_EQUAL_AREA: _specs(8823, 8802, *_FALSE_EN),
})


def required_parameters(projection_type: ProjectionType) -> Tuple[ParameterSpec, ...]:
    return PROJECTION_PARAMETERS.get(projection_type, ())


__all__ = [
    "ParameterSpec",
    "PARAMETER_NAMES",
    "PARAMETER_ALIASES",
    "PROJECTION_PARAMETERS",
    "required_parameters",
]
