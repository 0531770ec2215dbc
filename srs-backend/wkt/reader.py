"""Reader for the WKT 1 subset used in SRS definitions.

Turns definition text into a ``GeographicCS`` or ``ProjectedCS`` parse tree
(see ``wkt.tree``). The reader enforces the shape guarantees the SRS
builders rely on:

 - spheroid, prime meridian and unit values are numeric;
 - TOWGS84 has 3 or 7 values, missing ones are 0;
 - AXIS clauses come in pairs (or not at all) with a real direction.

Anything else raises ``ParseError`` carrying the SRID.
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Dict, List, NamedTuple, Optional, Sequence, Union

from srs_api.srs.errors import ParseError
from srs_api.srs.models import AxisDirection

from .tree import (
    Authority,
    Axes,
    Axis,
    CoordinateSystem,
    Datum,
    GeographicCS,
    Parameter,
    PrimeMeridian,
    Projection,
    ProjectedCS,
    Spheroid,
    TOWGS84,
    Unit,
)

_TOKEN_RE = re.compile(
    r"""
    (?P<string>"(?:[^"]|"")*")
    |(?P<number>[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)
    |(?P<word>[A-Za-z_][A-Za-z0-9_]*)
    |(?P<punct>[\[\]\(\),])
    """,
    re.VERBOSE,
)
_WS_RE = re.compile(r"\s*")

_CLOSERS = {"[": "]", "(": ")"}

# WKT 1 clauses nest about 6 deep
MAX_DEPTH = 64


class _Token(NamedTuple):
    kind: str
    text: str
    pos: int


class _Keyword(NamedTuple):
    """Unquoted word used as a value, e.g. the NORTH in AXIS["Lat", NORTH]."""

    name: str


@dataclass
class _Node:
    keyword: str
    args: List[Union[str, float, _Keyword, "_Node"]] = field(default_factory=list)
    pos: int = 0


_Value = Union[str, float, _Keyword, _Node]


def _tokenize(srid: int, text: str) -> List[_Token]:
    tokens: List[_Token] = []
    pos = _WS_RE.match(text, 0).end()
    while pos < len(text):
        m = _TOKEN_RE.match(text, pos)
        if not m:
            raise ParseError(srid, f"unexpected character {text[pos]!r} at offset {pos}")
        kind = m.lastgroup or "punct"
        tokens.append(_Token(kind, m.group(kind), pos))
        pos = _WS_RE.match(text, m.end()).end()
    return tokens


class _TreeBuilder:
    """Recursive descent over the token list into generic ``_Node`` objects."""

    def __init__(self, srid: int, tokens: List[_Token]):
        self.srid = srid
        self.tokens = tokens
        self.i = 0
        self.depth = 0

    def _peek(self) -> Optional[_Token]:
        return self.tokens[self.i] if self.i < len(self.tokens) else None

    def _next(self) -> _Token:
        tok = self._peek()
        if tok is None:
            raise ParseError(self.srid, "unexpected end of definition")
        self.i += 1
        return tok

    def _fail(self, tok: _Token) -> ParseError:
        return ParseError(self.srid, f"unexpected {tok.text!r} at offset {tok.pos}")

    def root(self) -> _Node:
        tok = self._next()
        if tok.kind != "word":
            raise self._fail(tok)
        node = self._node(tok)
        extra = self._peek()
        if extra is not None:
            raise self._fail(extra)
        return node

    def _node(self, head: _Token) -> _Node:
        self.depth += 1
        if self.depth > MAX_DEPTH:
            raise ParseError(self.srid, "definition nested too deeply")
        try:
            return self._node_body(head)
        finally:
            self.depth -= 1

    def _node_body(self, head: _Token) -> _Node:
        opener = self._next()
        if opener.text not in _CLOSERS:
            raise self._fail(opener)
        node = _Node(head.text.upper(), pos=head.pos)
        node.args.append(self._value())
        while True:
            tok = self._next()
            if tok.text == ",":
                node.args.append(self._value())
            elif tok.text == _CLOSERS[opener.text]:
                return node
            else:
                raise self._fail(tok)

    def _value(self) -> _Value:
        tok = self._next()
        if tok.kind == "string":
            return tok.text[1:-1].replace('""', '"')
        if tok.kind == "number":
            return float(tok.text)
        if tok.kind == "word":
            nxt = self._peek()
            if nxt is not None and nxt.text in _CLOSERS:
                return self._node(tok)
            return _Keyword(tok.text.upper())
        raise self._fail(tok)


# -----------------------------
# Shaping generic nodes into the parse tree
# -----------------------------


class _Shaper:
    def __init__(self, srid: int):
        self.srid = srid

    def _fail(self, node: _Node, what: str) -> ParseError:
        return ParseError(self.srid, f"{node.keyword} at offset {node.pos}: {what}")

    def _split(
        self,
        node: _Node,
        leading: int,
        allowed: Sequence[str],
    ) -> tuple[List[_Value], Dict[str, List[_Node]]]:
        """Separate the first ``leading`` plain values from the child clauses."""
        if len(node.args) < leading:
            raise self._fail(node, f"expected at least {leading} values")
        head = node.args[:leading]
        children: Dict[str, List[_Node]] = {k: [] for k in allowed}
        for arg in node.args[leading:]:
            if not isinstance(arg, _Node):
                raise self._fail(node, f"unexpected value {arg!r}")
            if arg.keyword not in children:
                raise self._fail(node, f"unexpected clause {arg.keyword}")
            children[arg.keyword].append(arg)
        return head, children

    def _one(self, node: _Node, children: Dict[str, List[_Node]], keyword: str) -> _Node:
        found = children.get(keyword) or []
        if len(found) != 1:
            raise self._fail(node, f"expected exactly one {keyword} clause")
        return found[0]

    def _at_most_one(self, node: _Node, children: Dict[str, List[_Node]], keyword: str) -> Optional[_Node]:
        found = children.get(keyword) or []
        if len(found) > 1:
            raise self._fail(node, f"more than one {keyword} clause")
        return found[0] if found else None

    def _string(self, node: _Node, value: _Value) -> str:
        if not isinstance(value, str):
            raise self._fail(node, f"expected a quoted string, got {value!r}")
        return value

    def _number(self, node: _Node, value: _Value) -> float:
        if not isinstance(value, float):
            raise self._fail(node, f"expected a number, got {value!r}")
        if not math.isfinite(value):
            raise self._fail(node, f"number out of range: {value!r}")
        return value

    # -- leaf clauses --

    def authority(self, node: Optional[_Node]) -> Optional[Authority]:
        if node is None:
            return None
        head, _ = self._split(node, 2, ())
        return Authority(name=self._string(node, head[0]), code=self._string(node, head[1]))

    def spheroid(self, node: _Node) -> Spheroid:
        head, ch = self._split(node, 3, ("AUTHORITY",))
        a = self._number(node, head[1])
        rf = self._number(node, head[2])
        if a <= 0:
            raise self._fail(node, "semi-major axis must be positive")
        if rf <= 0:
            raise self._fail(node, "inverse flattening must be positive")
        return Spheroid(
            name=self._string(node, head[0]),
            semi_major_axis=a,
            inverse_flattening=rf,
            authority=self.authority(self._at_most_one(node, ch, "AUTHORITY")),
        )

    def towgs84(self, node: Optional[_Node]) -> Optional[TOWGS84]:
        if node is None:
            return None
        if len(node.args) not in (3, 7):
            raise self._fail(node, "expected 3 or 7 values")
        return TOWGS84(*(self._number(node, v) for v in node.args))

    def datum(self, node: _Node) -> Datum:
        head, ch = self._split(node, 1, ("SPHEROID", "ELLIPSOID", "TOWGS84", "AUTHORITY"))
        spheroids = ch["SPHEROID"] + ch["ELLIPSOID"]
        if len(spheroids) != 1:
            raise self._fail(node, "expected exactly one SPHEROID clause")
        return Datum(
            name=self._string(node, head[0]),
            spheroid=self.spheroid(spheroids[0]),
            towgs84=self.towgs84(self._at_most_one(node, ch, "TOWGS84")),
            authority=self.authority(self._at_most_one(node, ch, "AUTHORITY")),
        )

    def prime_meridian(self, node: _Node) -> PrimeMeridian:
        head, ch = self._split(node, 2, ("AUTHORITY",))
        return PrimeMeridian(
            name=self._string(node, head[0]),
            longitude=self._number(node, head[1]),
            authority=self.authority(self._at_most_one(node, ch, "AUTHORITY")),
        )

    def unit(self, node: _Node) -> Unit:
        head, ch = self._split(node, 2, ("AUTHORITY",))
        factor = self._number(node, head[1])
        if factor <= 0:
            raise self._fail(node, "conversion factor must be positive")
        return Unit(
            name=self._string(node, head[0]),
            conversion_factor=factor,
            authority=self.authority(self._at_most_one(node, ch, "AUTHORITY")),
        )

    def axis(self, node: _Node) -> Axis:
        head, _ = self._split(node, 2, ())
        direction = head[1]
        if not isinstance(direction, _Keyword):
            raise self._fail(node, f"expected an axis direction, got {direction!r}")
        try:
            parsed = AxisDirection(direction.name)
        except ValueError:
            raise self._fail(node, f"unknown axis direction {direction.name}") from None
        if parsed is AxisDirection.UNSPECIFIED:
            raise self._fail(node, "axis direction must be specified")
        return Axis(name=self._string(node, head[0]), direction=parsed)

    def axes(self, parent: _Node, nodes: List[_Node]) -> Optional[Axes]:
        if not nodes:
            return None
        if len(nodes) != 2:
            raise self._fail(parent, "expected either no AXIS clause or two")
        return Axes(x=self.axis(nodes[0]), y=self.axis(nodes[1]))

    def projection(self, node: _Node) -> Projection:
        head, ch = self._split(node, 1, ("AUTHORITY",))
        return Projection(
            name=self._string(node, head[0]),
            authority=self.authority(self._at_most_one(node, ch, "AUTHORITY")),
        )

    def parameter(self, node: _Node) -> Parameter:
        head, ch = self._split(node, 2, ("AUTHORITY",))
        return Parameter(
            name=self._string(node, head[0]),
            value=self._number(node, head[1]),
            authority=self.authority(self._at_most_one(node, ch, "AUTHORITY")),
        )

    # -- coordinate systems --

    def geographic_cs(self, node: _Node) -> GeographicCS:
        head, ch = self._split(node, 1, ("DATUM", "PRIMEM", "UNIT", "AXIS", "AUTHORITY"))
        return GeographicCS(
            name=self._string(node, head[0]),
            datum=self.datum(self._one(node, ch, "DATUM")),
            prime_meridian=self.prime_meridian(self._one(node, ch, "PRIMEM")),
            angular_unit=self.unit(self._one(node, ch, "UNIT")),
            axes=self.axes(node, ch["AXIS"]),
            authority=self.authority(self._at_most_one(node, ch, "AUTHORITY")),
        )

    def projected_cs(self, node: _Node) -> ProjectedCS:
        head, ch = self._split(
            node, 1, ("GEOGCS", "PROJECTION", "PARAMETER", "UNIT", "AXIS", "AUTHORITY")
        )
        return ProjectedCS(
            name=self._string(node, head[0]),
            geographic_cs=self.geographic_cs(self._one(node, ch, "GEOGCS")),
            projection=self.projection(self._one(node, ch, "PROJECTION")),
            linear_unit=self.unit(self._one(node, ch, "UNIT")),
            parameters=[self.parameter(p) for p in ch["PARAMETER"]],
            axes=self.axes(node, ch["AXIS"]),
            authority=self.authority(self._at_most_one(node, ch, "AUTHORITY")),
        )


def read_wkt(srid: int, text: str) -> CoordinateSystem:
    """Parse SRS definition text into a ``GeographicCS`` or ``ProjectedCS``."""
    tokens = _tokenize(srid, text)
    if not tokens:
        raise ParseError(srid, "empty definition")
    root = _TreeBuilder(srid, tokens).root()
    shaper = _Shaper(srid)
    if root.keyword == "GEOGCS":
        return shaper.geographic_cs(root)
    if root.keyword == "PROJCS":
        return shaper.projected_cs(root)
    raise ParseError(srid, f"unsupported coordinate system {root.keyword}")


__all__ = ["read_wkt"]
