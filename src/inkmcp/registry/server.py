"""Read-only HTTP mirror of the ink catalog"""

import logging
from datetime import datetime, timezone
from typing import Optional, List

from fastapi import Depends, FastAPI, HTTPException, Query
from pydantic import BaseModel

from ..catalog.errors import CatalogLoadError, InkNotFound
from ..catalog.store import Catalog
from ..engine.convert import hex_to_rgb
from ..engine.errors import InvalidFormat
from ..engine.search import find_closest
from ..models import InkResult
from ..servers.ink import get_catalog, startup

logger = logging.getLogger(__name__)

app = FastAPI(title="Fountain Pen Ink Catalog", description="Read-only ink catalog with color search")


class InksResponse(BaseModel):
    inks: List[InkResult]
    metadata: dict


class ClosestResponse(BaseModel):
    target_color: str
    target_rgb: List[int]
    results: List[InkResult]


def loaded_catalog() -> Catalog:
    """The shared catalog, or 503 when it cannot be loaded"""
    try:
        return get_catalog()
    except CatalogLoadError as exc:
        logger.error(f"Error loading ink data: {exc}")
        raise HTTPException(status_code=503, detail="Ink catalog unavailable") from exc


@app.get("/v0/inks", response_model=InksResponse, response_model_exclude_none=True)
async def list_inks(
    limit: int = Query(default=30, ge=1, le=100),
    cursor: Optional[str] = Query(default=None, description="Id of the last ink on the previous page"),
    catalog: Catalog = Depends(loaded_catalog),
):
    """List inks in catalog order with cursor pagination"""
    inks, next_cursor = catalog.page(limit, after=cursor)
    return InksResponse(
        inks=[catalog.to_result(ink) for ink in inks],
        metadata={"next_cursor": next_cursor, "count": len(inks)},
    )


@app.get("/v0/inks/{ink_id}", response_model=InkResult, response_model_exclude_none=True)
async def get_ink(ink_id: str, catalog: Catalog = Depends(loaded_catalog)):
    """Retrieve a single ink with its metadata"""
    try:
        ink = catalog.get_ink(ink_id)
    except InkNotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return catalog.to_result(ink)


@app.get("/v0/colors/{hex_color}/closest", response_model=ClosestResponse, response_model_exclude_none=True)
async def closest_inks(
    hex_color: str,
    limit: int = Query(default=5, ge=1, le=100),
    catalog: Catalog = Depends(loaded_catalog),
):
    """Find the inks closest to a hex color (without the leading #)"""
    try:
        target = hex_to_rgb(hex_color)
    except InvalidFormat as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    closest = find_closest(target, catalog.inks, limit)
    return ClosestResponse(
        target_color=hex_color,
        target_rgb=list(target),
        results=[catalog.to_result(s.ink, s.distance) for s in closest],
    )


@app.get("/health")
async def health_check(catalog: Catalog = Depends(loaded_catalog)):
    """Health check endpoint"""
    return {
        "status": "healthy",
        "inks": len(catalog),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


def main() -> None:
    """Run the catalog HTTP server"""
    import uvicorn

    settings = startup()
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)

if __name__ == "__main__":
    main()
