"""Spatial reference system model built from WKT definitions.

Modules:
 - models: geographic and projected SRS records, enums
 - params: per-projection mandatory parameter table (EPSG codes)
 - resolver: fills parameter slots from parse tree parameters
 - dispatch: EPSG projection method code -> projection kind
 - builders: geographic/projected record construction
 - parse: entry point (text -> record)
 - errors: ParseError, MissingParameterError
"""

__all__ = [
    "models",
    "params",
    "resolver",
    "dispatch",
    "builders",
    "parse",
    "errors",
]
