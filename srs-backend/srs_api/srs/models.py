from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple


class SrsType(str, Enum):
    GEOGRAPHIC = "geographic"
    PROJECTED = "projected"


class AxisDirection(str, Enum):
    UNSPECIFIED = "UNSPECIFIED"
    NORTH = "NORTH"
    SOUTH = "SOUTH"
    EAST = "EAST"
    WEST = "WEST"
    OTHER = "OTHER"


class ProjectionType(str, Enum):
    """Projection kinds understood by the model (plus UNKNOWN)."""

    UNKNOWN = "Unknown projection"
    POPULAR_VISUALISATION_PSEUDO_MERCATOR = "Popular Visualisation Pseudo Mercator"
    LAMBERT_AZIMUTHAL_EQUAL_AREA_SPHERICAL = "Lambert Azimuthal Equal Area (Spherical)"
    EQUIDISTANT_CYLINDRICAL = "Equidistant Cylindrical"
    EQUIDISTANT_CYLINDRICAL_SPHERICAL = "Equidistant Cylindrical (Spherical)"
    KROVAK_NORTH_ORIENTATED = "Krovak (North Orientated)"
    KROVAK_MODIFIED = "Krovak Modified"
    KROVAK_MODIFIED_NORTH_ORIENTATED = "Krovak Modified (North Orientated)"
    LAMBERT_CONIC_CONFORMAL_2SP_MICHIGAN = "Lambert Conic Conformal (2SP Michigan)"
    COLOMBIA_URBAN = "Colombia Urban"
    LAMBERT_CONIC_CONFORMAL_1SP = "Lambert Conic Conformal (1SP)"
    LAMBERT_CONIC_CONFORMAL_2SP = "Lambert Conic Conformal (2SP)"
    LAMBERT_CONIC_CONFORMAL_2SP_BELGIUM = "Lambert Conic Conformal (2SP Belgium)"
    MERCATOR_VARIANT_A = "Mercator (variant A)"
    MERCATOR_VARIANT_B = "Mercator (variant B)"
    CASSINI_SOLDNER = "Cassini-Soldner"
    TRANSVERSE_MERCATOR = "Transverse Mercator"
    TRANSVERSE_MERCATOR_SOUTH_ORIENTATED = "Transverse Mercator (South Orientated)"
    OBLIQUE_STEREOGRAPHIC = "Oblique Stereographic"
    POLAR_STEREOGRAPHIC_VARIANT_A = "Polar Stereographic (variant A)"
    NEW_ZEALAND_MAP_GRID = "New Zealand Map Grid"
    HOTINE_OBLIQUE_MERCATOR_VARIANT_A = "Hotine Oblique Mercator (variant A)"
    LABORDE_OBLIQUE_MERCATOR = "Laborde Oblique Mercator"
    HOTINE_OBLIQUE_MERCATOR_VARIANT_B = "Hotine Oblique Mercator (variant B)"
    TUNISIA_MINING_GRID = "Tunisia Mining Grid"
    LAMBERT_CONIC_NEAR_CONFORMAL = "Lambert Conic Near-Conformal"
    AMERICAN_POLYCONIC = "American Polyconic"
    KROVAK = "Krovak"
    LAMBERT_AZIMUTHAL_EQUAL_AREA = "Lambert Azimuthal Equal Area"
    ALBERS_EQUAL_AREA = "Albers Equal Area"
    TRANSVERSE_MERCATOR_ZONED_GRID_SYSTEM = "Transverse Mercator Zoned Grid System"
    LAMBERT_CONIC_CONFORMAL_WEST_ORIENTATED = "Lambert Conic Conformal (West Orientated)"
    BONNE_SOUTH_ORIENTATED = "Bonne (South Orientated)"
    POLAR_STEREOGRAPHIC_VARIANT_B = "Polar Stereographic (variant B)"
    POLAR_STEREOGRAPHIC_VARIANT_C = "Polar Stereographic (variant C)"
    GUAM_PROJECTION = "Guam Projection"
    MODIFIED_AZIMUTHAL_EQUIDISTANT = "Modified Azimuthal Equidistant"
    HYPERBOLIC_CASSINI_SOLDNER = "Hyperbolic Cassini-Soldner"
    LAMBERT_CYLINDRICAL_EQUAL_AREA_SPHERICAL = "Lambert Cylindrical Equal Area (Spherical)"
    LAMBERT_CYLINDRICAL_EQUAL_AREA = "Lambert Cylindrical Equal Area"


AxisPair = Tuple[AxisDirection, AxisDirection]

WGS84_SEMI_MAJOR_AXIS = 6378137.0
WGS84_INVERSE_FLATTENING = 298.257223563


def _fmt(v: float) -> str:
    # Shortest round-trip repr, without the trailing '.0' of integral values
    s = repr(float(v))
    return s[:-2] if s.endswith(".0") else s


@dataclass(frozen=True)
class GeographicSrs:
    semi_major_axis: float
    inverse_flattening: float
    prime_meridian: float
    angular_unit: float
    towgs84: Optional[Tuple[float, ...]] = None
    axes: Optional[AxisPair] = None

    @property
    def srs_type(self) -> SrsType:
        return SrsType.GEOGRAPHIC

    def has_towgs84(self) -> bool:
        return self.towgs84 is not None

    def is_wgs84_based(self) -> bool:
        if self.semi_major_axis != WGS84_SEMI_MAJOR_AXIS:
            return False
        if self.inverse_flattening != WGS84_INVERSE_FLATTENING:
            return False
        return self.towgs84 is None or all(v == 0.0 for v in self.towgs84)

    def x_axis_direction(self) -> AxisDirection:
        return self.axes[0] if self.axes else AxisDirection.UNSPECIFIED

    def y_axis_direction(self) -> AxisDirection:
        return self.axes[1] if self.axes else AxisDirection.UNSPECIFIED

    def proj4_parameters(self) -> str:
        """Ellipsoid and datum shift as a proj4 argument string."""
        parts = [
            "+proj=lonlat",
            f"+a={_fmt(self.semi_major_axis)}",
            f"+rf={_fmt(self.inverse_flattening)}",
        ]
        if self.towgs84 is not None:
            parts.append("+towgs84=" + ",".join(_fmt(v) for v in self.towgs84))
        parts.append("+no_defs")
        return " ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "srs_type": self.srs_type.value,
            "geographic": self._geographic_dict(),
        }

    def _geographic_dict(self) -> Dict[str, Any]:
        return {
            "semi_major_axis": self.semi_major_axis,
            "inverse_flattening": self.inverse_flattening,
            "prime_meridian": self.prime_meridian,
            "angular_unit": self.angular_unit,
            "towgs84": list(self.towgs84) if self.towgs84 is not None else None,
            "axes": [a.value for a in self.axes] if self.axes else None,
            "wgs84_based": self.is_wgs84_based(),
        }


@dataclass(frozen=True)
class ProjectedSrs:
    """A geographic SRS plus a projection and its resolved parameters."""

    geographic_srs: GeographicSrs
    linear_unit: float
    projection_type: ProjectionType
    parameters: Mapping[str, float] = field(default_factory=lambda: MappingProxyType({}))
    axes: Optional[AxisPair] = None

    def __post_init__(self) -> None:
        if not isinstance(self.parameters, MappingProxyType):
            object.__setattr__(self, "parameters", MappingProxyType(dict(self.parameters)))

    @property
    def srs_type(self) -> SrsType:
        return SrsType.PROJECTED

    def parameter(self, name: str) -> float:
        return self.parameters[name]

    def x_axis_direction(self) -> AxisDirection:
        return self.axes[0] if self.axes else AxisDirection.UNSPECIFIED

    def y_axis_direction(self) -> AxisDirection:
        return self.axes[1] if self.axes else AxisDirection.UNSPECIFIED

    def to_dict(self) -> Dict[str, Any]:
        # Local import: dispatch depends on this module
        from .dispatch import method_code

        return {
            "srs_type": self.srs_type.value,
            "geographic": self.geographic_srs._geographic_dict(),
            "projected": {
                "linear_unit": self.linear_unit,
                "axes": [a.value for a in self.axes] if self.axes else None,
                "projection": self.projection_type.value,
                "projection_method_code": method_code(self.projection_type),
                "parameters": dict(self.parameters),
            },
        }


__all__ = [
    "SrsType",
    "AxisDirection",
    "ProjectionType",
    "GeographicSrs",
    "ProjectedSrs",
    "WGS84_SEMI_MAJOR_AXIS",
    "WGS84_INVERSE_FLATTENING",
]
