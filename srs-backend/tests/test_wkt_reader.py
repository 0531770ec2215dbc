import pytest

from srs_api.srs.errors import ParseError
from srs_api.srs.models import AxisDirection
from wkt.reader import read_wkt
from wkt.tree import GeographicCS, ProjectedCS

WGS84_GEOGCS = (
    'GEOGCS["WGS 84",'
    'DATUM["World Geodetic System 1984",'
    'SPHEROID["WGS 84",6378137,298.257223563,AUTHORITY["EPSG","7030"]],'
    'AUTHORITY["EPSG","6326"]],'
    'PRIMEM["Greenwich",0,AUTHORITY["EPSG","8901"]],'
    'UNIT["degree",0.017453292519943278,AUTHORITY["EPSG","9122"]],'
    'AXIS["Lat",NORTH],AXIS["Lon",EAST],'
    'AUTHORITY["EPSG","4326"]]'
)

UTM32N_PARAMS = [
    ("latitude_of_origin", 0, "8801"),
    ("central_meridian", 9, "8802"),
    ("scale_factor", 0.9996, "8805"),
    ("false_easting", 500000, "8806"),
    ("false_northing", 0, "8807"),
]


def make_projcs(params=UTM32N_PARAMS, method=("Transverse Mercator", "9807"), with_codes=True):
    """Build PROJCS text; params are (name, value, epsg_code) triples."""
    parts = ['PROJCS["test projection"', WGS84_GEOGCS]
    if method[1] is None:
        parts.append(f'PROJECTION["{method[0]}"]')
    else:
        parts.append(f'PROJECTION["{method[0]}",AUTHORITY["EPSG","{method[1]}"]]')
    for name, value, code in params:
        if with_codes and code:
            parts.append(f'PARAMETER["{name}",{value},AUTHORITY["EPSG","{code}"]]')
        else:
            parts.append(f'PARAMETER["{name}",{value}]')
    parts.append('UNIT["metre",1,AUTHORITY["EPSG","9001"]]')
    parts.append('AXIS["E",EAST],AXIS["N",NORTH]')
    return ",".join(parts) + "]"


def test_read_geographic():
    cs = read_wkt(4326, WGS84_GEOGCS)
    assert isinstance(cs, GeographicCS)
    assert cs.name == "WGS 84"
    assert cs.datum.spheroid.semi_major_axis == 6378137
    assert cs.datum.spheroid.inverse_flattening == 298.257223563
    assert cs.datum.towgs84 is None
    assert cs.prime_meridian.longitude == 0
    assert cs.angular_unit.conversion_factor == 0.017453292519943278
    assert cs.axes.x.direction is AxisDirection.NORTH
    assert cs.axes.y.direction is AxisDirection.EAST
    assert cs.authority.name == "EPSG" and cs.authority.code == "4326"


def test_read_projected_keeps_parameter_order_and_authorities():
    cs = read_wkt(32632, make_projcs())
    assert isinstance(cs, ProjectedCS)
    assert cs.projection.authority.code == "9807"
    assert [p.name for p in cs.parameters] == [p[0] for p in UTM32N_PARAMS]
    assert [p.authority.code for p in cs.parameters] == [p[2] for p in UTM32N_PARAMS]
    assert cs.parameters[2].value == 0.9996
    assert cs.linear_unit.conversion_factor == 1
    assert cs.axes.x.direction is AxisDirection.EAST


def test_towgs84_short_form_is_zero_padded():
    text = WGS84_GEOGCS.replace(
        'AUTHORITY["EPSG","6326"]]', 'TOWGS84[-87,-98,-121],AUTHORITY["EPSG","6326"]]'
    )
    cs = read_wkt(1, text)
    assert cs.datum.towgs84.values() == (-87, -98, -121, 0, 0, 0, 0)


def test_parentheses_lowercase_keywords_and_whitespace():
    text = """
        geogcs ("NTF (Paris)",
          datum ("Nouvelle Triangulation Francaise (Paris)",
            spheroid ("Clarke 1880 (IGN)", 6378249.2, 293.4660212936269)),
          primem ("Paris", 2.5969213),
          unit ("grad", 0.015707963267948967))
    """
    cs = read_wkt(4807, text)
    assert cs.name == "NTF (Paris)"
    assert cs.prime_meridian.longitude == 2.5969213
    assert cs.axes is None
    assert cs.authority is None


def test_quoted_string_escape():
    cs = read_wkt(1, WGS84_GEOGCS.replace('"WGS 84",DATUM', '"say ""hi""",DATUM'))
    assert cs.name == 'say "hi"'


@pytest.mark.parametrize(
    "text",
    [
        "   ",
        "GEOGCS",
        WGS84_GEOGCS[:-1],
        WGS84_GEOGCS + "]",
        WGS84_GEOGCS + " extra",
        WGS84_GEOGCS.replace("]]", ")]", 1),
        'VERT_CS["height",VERT_DATUM["x",2005]]',
        WGS84_GEOGCS.replace(',AXIS["Lon",EAST]', ""),
        WGS84_GEOGCS.replace("AXIS[\"Lon\",EAST]", 'AXIS["Lon",UNSPECIFIED]'),
        WGS84_GEOGCS.replace("AXIS[\"Lon\",EAST]", 'AXIS["Lon",UP]'),
        WGS84_GEOGCS.replace("0.017453292519943278", "-1"),
        WGS84_GEOGCS.replace("0.017453292519943278", "-1e999"),
        WGS84_GEOGCS.replace("6378137", "1e999"),
        make_projcs().replace("500000", "1e999"),
        WGS84_GEOGCS.replace("6378137", '"big"'),
        WGS84_GEOGCS.replace('PRIMEM["Greenwich",0,AUTHORITY["EPSG","8901"]],', ""),
        WGS84_GEOGCS.replace('AUTHORITY["EPSG","6326"]]', 'TOWGS84[1,2,3,4,5],AUTHORITY["EPSG","6326"]]'),
        WGS84_GEOGCS.replace("#", "") + "#",
    ],
)
def test_invalid_definitions_raise_parse_error(text):
    with pytest.raises(ParseError) as exc:
        read_wkt(1234, text)
    assert exc.value.srid == 1234


def test_projcs_requires_linear_unit():
    text = make_projcs().replace(',UNIT["metre",1,AUTHORITY["EPSG","9001"]]', "")
    with pytest.raises(ParseError):
        read_wkt(2, text)


def test_deep_nesting_is_a_parse_error():
    text = "A[" * 20000 + "1" + "]" * 20000
    with pytest.raises(ParseError) as exc:
        read_wkt(77, text)
    assert exc.value.srid == 77
    assert "nested too deeply" in exc.value.detail
