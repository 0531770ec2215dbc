from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from srs_api.srs.models import AxisDirection


@dataclass
class Authority:
    name: str = ""
    code: str = ""


@dataclass
class Spheroid:
    name: str
    semi_major_axis: float
    inverse_flattening: float
    authority: Optional[Authority] = None


@dataclass
class TOWGS84:
    """Datum shift. Values not given in the text are 0."""

    dx: float = 0.0
    dy: float = 0.0
    dz: float = 0.0
    ex: float = 0.0
    ey: float = 0.0
    ez: float = 0.0
    ppm: float = 0.0

    def values(self) -> Tuple[float, ...]:
        return (self.dx, self.dy, self.dz, self.ex, self.ey, self.ez, self.ppm)


@dataclass
class Datum:
    name: str
    spheroid: Spheroid
    towgs84: Optional[TOWGS84] = None
    authority: Optional[Authority] = None


@dataclass
class PrimeMeridian:
    name: str
    longitude: float
    authority: Optional[Authority] = None


@dataclass
class Unit:
    name: str
    conversion_factor: float
    authority: Optional[Authority] = None


@dataclass
class Axis:
    name: str
    direction: AxisDirection


@dataclass
class Axes:
    x: Axis
    y: Axis


@dataclass
class Projection:
    name: str
    authority: Optional[Authority] = None


@dataclass
class Parameter:
    name: str
    value: float
    authority: Optional[Authority] = None


@dataclass
class GeographicCS:
    name: str
    datum: Datum
    prime_meridian: PrimeMeridian
    angular_unit: Unit
    axes: Optional[Axes] = None
    authority: Optional[Authority] = None


@dataclass
class ProjectedCS:
    name: str
    geographic_cs: GeographicCS
    projection: Projection
    linear_unit: Unit
    parameters: List[Parameter] = field(default_factory=list)
    axes: Optional[Axes] = None
    authority: Optional[Authority] = None


CoordinateSystem = Union[GeographicCS, ProjectedCS]


__all__ = [
    "Authority",
    "Spheroid",
    "TOWGS84",
    "Datum",
    "PrimeMeridian",
    "Unit",
    "Axis",
    "Axes",
    "Projection",
    "Parameter",
    "GeographicCS",
    "ProjectedCS",
    "CoordinateSystem",
]
