"""Typed failures raised while building an SRS from its definition.

Callers (the catalog layer, the HTTP service) turn these into user-facing
messages; the SRID is carried for diagnostics only.
"""
from __future__ import annotations


class SrsError(Exception):
    """Base class for SRS definition errors."""

    def __init__(self, srid: int, message: str):
        super().__init__(message)
        self.srid = srid


class ParseError(SrsError):
    """The definition text is empty or does not follow the WKT grammar."""

    def __init__(self, srid: int, detail: str | None = None):
        message = f"SRS {srid}: invalid SRS definition"
        if detail:
            message += f" ({detail})"
        super().__init__(srid, message)
        self.detail = detail


class MissingParameterError(SrsError):
    """A mandatory projection parameter could not be resolved."""

    def __init__(self, srid: int, parameter_name: str, epsg_code: int):
        super().__init__(
            srid,
            f"SRS {srid}: missing projection parameter '{parameter_name}' (EPSG:{epsg_code})",
        )
        self.parameter_name = parameter_name
        self.epsg_code = epsg_code


__all__ = ["SrsError", "ParseError", "MissingParameterError"]
