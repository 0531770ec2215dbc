import logging
import os
from typing import List

from fastapi import APIRouter, HTTPException, Request

from srs_api.cache import srs_cache_key
from srs_api.schemas import (
    ParameterInfo,
    ParseSrsRequest,
    ProjectionInfo,
    SrsResponse,
)
from srs_api.srs.dispatch import PROJECTION_METHODS
from srs_api.srs.params import required_parameters
from srs_api.srs.parse import parse_wkt

logger = logging.getLogger(__name__)

router = APIRouter()


def _max_definition_length() -> int:
    return int(os.getenv("SRS_MAX_DEFINITION_LENGTH", "65535"))


@router.post("/srs/parse", response_model=SrsResponse)
async def parse_srs(req: ParseSrsRequest, request: Request) -> SrsResponse:
    """Parse a WKT SRS definition into its geographic/projected model.

    Body schema:
      {
        "srid": 32632,
        "definition": "PROJCS[\"WGS 84 / UTM zone 32N\", GEOGCS[...], ...]"
      }

    ParseError and MissingParameterError are turned into 422 responses by
    the handlers registered in ``srs_api.main``.
    """
    if len(req.definition) > _max_definition_length():
        raise HTTPException(status_code=413, detail="SRS definition too long")

    cache = getattr(request.app.state, "cache", None)
    cache_key = srs_cache_key(req.srid, req.definition) if cache else None
    if cache and cache_key:
        cached = await cache.get_json(cache_key)
        if cached:
            try:
                return SrsResponse(**cached)
            except ValueError:
                # Stale entry from an older schema: ignore
                logger.debug("ignoring stale cache entry %s", cache_key)

    srs = parse_wkt(req.srid, req.definition)
    resp = SrsResponse(srid=req.srid, **srs.to_dict())
    logger.info("srs parsed", extra={"srid": req.srid})

    if cache and cache_key:
        await cache.set_json(cache_key, resp.model_dump())
    return resp


@router.get("/srs/projections", response_model=List[ProjectionInfo])
async def list_projections() -> List[ProjectionInfo]:
    """Supported projection methods and the parameters each one requires."""
    out: List[ProjectionInfo] = []
    for code, kind in sorted(PROJECTION_METHODS.items()):
        out.append(ProjectionInfo(
            epsg_code=code,
            name=kind.value,
            parameters=[
                ParameterInfo(name=p.name, epsg_code=p.epsg_code, alias=p.alias)
                for p in required_parameters(kind)
            ],
        ))
    return out
