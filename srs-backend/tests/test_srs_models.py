import dataclasses

import pytest

from srs_api.srs.models import AxisDirection, GeographicSrs, ProjectedSrs, ProjectionType

DEGREE = 0.017453292519943278


def wgs84(**kw):
    base = dict(semi_major_axis=6378137.0, inverse_flattening=298.257223563, prime_meridian=0.0, angular_unit=DEGREE)
    base.update(kw)
    return GeographicSrs(**base)


def test_wgs84_based():
    assert wgs84().is_wgs84_based()
    assert wgs84(towgs84=(0.0,) * 7).is_wgs84_based()
    assert not wgs84(towgs84=(1.0, 0, 0, 0, 0, 0, 0)).is_wgs84_based()
    assert not wgs84(semi_major_axis=6378249.145, inverse_flattening=293.465).is_wgs84_based()


def test_proj4_parameters():
    assert wgs84().proj4_parameters() == "+proj=lonlat +a=6378137 +rf=298.257223563 +no_defs"
    shifted = wgs84(towgs84=(-87.0, -98.0, -121.0, 0.0, 0.0, 0.0, 0.5))
    assert shifted.proj4_parameters() == (
        "+proj=lonlat +a=6378137 +rf=298.257223563 +towgs84=-87,-98,-121,0,0,0,0.5 +no_defs"
    )


def test_records_are_immutable():
    srs = ProjectedSrs(
        geographic_srs=wgs84(),
        linear_unit=1.0,
        projection_type=ProjectionType.MERCATOR_VARIANT_B,
        parameters={"standard_parallel_1": 0.0},
    )
    with pytest.raises(dataclasses.FrozenInstanceError):
        srs.linear_unit = 2.0  # type: ignore[misc]
    with pytest.raises(TypeError):
        srs.parameters["standard_parallel_1"] = 1.0  # type: ignore[index]


def test_projected_to_dict():
    srs = ProjectedSrs(
        geographic_srs=wgs84(axes=(AxisDirection.NORTH, AxisDirection.EAST)),
        linear_unit=0.3048,
        projection_type=ProjectionType.TRANSVERSE_MERCATOR,
        parameters={"scale_factor": 0.9996},
        axes=(AxisDirection.EAST, AxisDirection.NORTH),
    )
    d = srs.to_dict()
    assert d["srs_type"] == "projected"
    assert d["geographic"]["axes"] == ["NORTH", "EAST"]
    assert d["geographic"]["wgs84_based"] is True
    assert d["projected"]["projection"] == "Transverse Mercator"
    assert d["projected"]["projection_method_code"] == 9807
    assert d["projected"]["parameters"] == {"scale_factor": 0.9996}
    assert srs.x_axis_direction() is AxisDirection.EAST


def test_geographic_to_dict_has_no_projection():
    d = wgs84().to_dict()
    assert d["srs_type"] == "geographic"
    assert "projected" not in d
    assert d["geographic"]["towgs84"] is None
