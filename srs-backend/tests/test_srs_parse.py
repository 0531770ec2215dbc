import pytest

from srs_api.srs.errors import MissingParameterError, ParseError
from srs_api.srs.models import GeographicSrs, ProjectedSrs, ProjectionType, SrsType
from srs_api.srs.parse import parse_wkt
from tests.test_wkt_reader import UTM32N_PARAMS, WGS84_GEOGCS, make_projcs


def test_transverse_mercator_end_to_end():
    srs = parse_wkt(32632, make_projcs())
    assert isinstance(srs, ProjectedSrs)
    assert srs.srs_type is SrsType.PROJECTED
    assert srs.projection_type is ProjectionType.TRANSVERSE_MERCATOR
    assert dict(srs.parameters) == {
        "latitude_of_origin": 0.0,
        "central_meridian": 9.0,
        "scale_factor": 0.9996,
        "false_easting": 500000.0,
        "false_northing": 0.0,
    }
    assert srs.geographic_srs.is_wgs84_based()


def test_transverse_mercator_by_name_only():
    srs = parse_wkt(32632, make_projcs(with_codes=False))
    assert srs.parameter("scale_factor") == 0.9996


def test_missing_scale_factor():
    params = [p for p in UTM32N_PARAMS if p[0] != "scale_factor"]
    with pytest.raises(MissingParameterError) as exc:
        parse_wkt(32632, make_projcs(params))
    assert (exc.value.srid, exc.value.parameter_name, exc.value.epsg_code) == (32632, "scale_factor", 8805)


def test_geographic_end_to_end():
    srs = parse_wkt(4326, WGS84_GEOGCS)
    assert isinstance(srs, GeographicSrs)
    assert srs.srs_type is SrsType.GEOGRAPHIC
    assert srs.semi_major_axis == 6378137.0


def test_unknown_projection_method_code():
    srs = parse_wkt(1, make_projcs(method=("Something new", "99999")))
    assert srs.projection_type is ProjectionType.UNKNOWN
    assert dict(srs.parameters) == {}
    assert srs.linear_unit == 1.0


def test_projection_without_authority_is_unknown():
    srs = parse_wkt(1, make_projcs(method=("Transverse_Mercator", None)))
    assert srs.projection_type is ProjectionType.UNKNOWN


@pytest.mark.parametrize("text", [None, ""])
def test_empty_definition_skips_tokenizer(text):
    calls = []

    def tokenizer(srid, definition):
        calls.append(definition)
        raise AssertionError("tokenizer must not be called")

    with pytest.raises(ParseError) as exc:
        parse_wkt(77, text, tokenizer=tokenizer)
    assert exc.value.srid == 77
    assert calls == []


def test_empty_range_is_a_parse_error():
    with pytest.raises(ParseError):
        parse_wkt(5, WGS84_GEOGCS, begin=10, end=10)


def test_text_range():
    padded = "xx" + WGS84_GEOGCS + "yy"
    srs = parse_wkt(4326, padded, begin=2, end=2 + len(WGS84_GEOGCS))
    assert srs.inverse_flattening == 298.257223563


def test_grammar_error_carries_srid():
    with pytest.raises(ParseError) as exc:
        parse_wkt(2000, "GEOGCS[")
    assert exc.value.srid == 2000
    assert str(exc.value).startswith("SRS 2000: invalid SRS definition")


def test_custom_tokenizer_result_is_routed():
    from wkt.reader import read_wkt

    seen = []

    def tokenizer(srid, definition):
        seen.append(srid)
        return read_wkt(srid, definition)

    srs = parse_wkt(3, make_projcs(), tokenizer=tokenizer)
    assert seen == [3]
    assert srs.projection_type is ProjectionType.TRANSVERSE_MERCATOR


def test_tokenizer_returning_other_shape_is_a_parse_error():
    with pytest.raises(ParseError):
        parse_wkt(3, "anything", tokenizer=lambda srid, text: object())
