from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ParseSrsRequest(BaseModel):
    srid: int = Field(ge=0, le=4294967295, description="Spatial reference system ID")
    definition: str = Field(description="WKT definition (GEOGCS[...] or PROJCS[...])")


class GeographicSrsJSON(BaseModel):
    semi_major_axis: float
    inverse_flattening: float
    prime_meridian: float
    angular_unit: float = Field(description="Radians per angular unit")
    towgs84: Optional[List[float]] = None
    axes: Optional[List[str]] = None
    wgs84_based: bool = False

    @field_validator("towgs84")
    @classmethod
    def _validate_towgs84(cls, v: Optional[List[float]]) -> Optional[List[float]]:
        # all seven or nothing
        if v is not None and len(v) != 7:
            raise ValueError("towgs84 must have exactly 7 values")
        return v

    @field_validator("axes")
    @classmethod
    def _validate_axes(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        if v is not None and len(v) != 2:
            raise ValueError("axes must have exactly 2 directions")
        return v


class ProjectedSrsJSON(BaseModel):
    linear_unit: float = Field(description="Meters per linear unit")
    axes: Optional[List[str]] = None
    projection: str
    projection_method_code: int = Field(description="EPSG method code, 0 if unknown")
    parameters: Dict[str, float] = Field(default_factory=dict)


class SrsResponse(BaseModel):
    srid: int
    srs_type: Literal["geographic", "projected"]
    geographic: GeographicSrsJSON
    projected: Optional[ProjectedSrsJSON] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "srid": 32632,
                "srs_type": "projected",
                "geographic": {
                    "semi_major_axis": 6378137.0,
                    "inverse_flattening": 298.257223563,
                    "prime_meridian": 0.0,
                    "angular_unit": 0.017453292519943278,
                    "towgs84": None,
                    "axes": ["NORTH", "EAST"],
                    "wgs84_based": True,
                },
                "projected": {
                    "linear_unit": 1.0,
                    "axes": ["EAST", "NORTH"],
                    "projection": "Transverse Mercator",
                    "projection_method_code": 9807,
                    "parameters": {
                        "latitude_of_origin": 0.0,
                        "central_meridian": 9.0,
                        "scale_factor": 0.9996,
                        "false_easting": 500000.0,
                        "false_northing": 0.0,
                    },
                },
            }
        }
    )


class ParameterInfo(BaseModel):
    name: str
    epsg_code: int
    alias: Optional[str] = None


class ProjectionInfo(BaseModel):
    epsg_code: int
    name: str
    parameters: List[ParameterInfo] = Field(default_factory=list)


class SrsErrorResponse(BaseModel):
    error: Literal["parse_error", "missing_parameter"]
    srid: int
    message: str
    parameter: Optional[str] = None
    epsg_code: Optional[int] = None
