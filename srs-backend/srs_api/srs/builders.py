from __future__ import annotations

import logging
import math
from typing import Optional

from wkt.tree import Axes, GeographicCS, ProjectedCS

from .dispatch import select_projection_type
from .models import AxisDirection, AxisPair, GeographicSrs, ProjectedSrs
from .params import required_parameters
from .resolver import resolve_parameters

logger = logging.getLogger(__name__)


def _axis_pair(axes: Optional[Axes]) -> Optional[AxisPair]:
    if axes is None:
        return None
    pair = (axes.x.direction, axes.y.direction)
    # The reader requires either both or none to be specified
    assert AxisDirection.UNSPECIFIED not in pair
    return pair


def build_geographic(srid: int, node: GeographicCS) -> GeographicSrs:
    """Build a geographic SRS record from a GEOGCS parse tree.

    Never fails: the reader guarantees every mandatory value is present.
    """
    spheroid = node.datum.spheroid
    towgs84 = node.datum.towgs84.values() if node.datum.towgs84 is not None else None

    srs = GeographicSrs(
        semi_major_axis=spheroid.semi_major_axis,
        inverse_flattening=spheroid.inverse_flattening,
        prime_meridian=node.prime_meridian.longitude,
        angular_unit=node.angular_unit.conversion_factor,
        towgs84=towgs84,
        axes=_axis_pair(node.axes),
    )

    assert not math.isnan(srs.semi_major_axis)
    assert not math.isnan(srs.inverse_flattening)
    assert not math.isnan(srs.prime_meridian)
    assert not math.isnan(srs.angular_unit)
    assert towgs84 is None or not any(math.isnan(v) for v in towgs84)
    return srs


def build_projected(srid: int, node: ProjectedCS) -> ProjectedSrs:
    """Build a projected SRS record from a PROJCS parse tree.

    Raises MissingParameterError if a parameter required by the projection
    kind cannot be found; no record is produced in that case.
    """
    geographic = build_geographic(srid, node.geographic_cs)
    assert not math.isnan(node.linear_unit.conversion_factor)

    authority = node.projection.authority
    projection_type = select_projection_type(
        authority.name if authority else None,
        authority.code if authority else None,
    )
    parameters = resolve_parameters(srid, node.parameters, required_parameters(projection_type))
    logger.debug("srs %s: %s with %d parameters", srid, projection_type.name, len(parameters))

    return ProjectedSrs(
        geographic_srs=geographic,
        linear_unit=node.linear_unit.conversion_factor,
        projection_type=projection_type,
        parameters=parameters,
        axes=_axis_pair(node.axes),
    )


__all__ = ["build_geographic", "build_projected"]
