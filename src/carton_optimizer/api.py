"""FastAPI endpoint for the carton optimizer."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import Field

from carton_optimizer.config import configure_logging, get_settings
from carton_optimizer.models import BoxSize, PackableItem, PackingResult, CamelModel
from carton_optimizer.metrics import packed_quantity
from carton_optimizer.packing.first_fit import pack

logger = logging.getLogger(__name__)

settings = get_settings()


class PackRequest(CamelModel):
    """Request body for /shipping/pack: the two engine inputs verbatim."""

    items: list[PackableItem] = Field(default_factory=list, description="Cart items to pack")
    available_boxes: list[BoxSize] = Field(default_factory=list, description="Box catalog")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    configure_logging(settings)
    yield


app = FastAPI(
    lifespan=lifespan,
    title=settings.api_title,
    description="Cartonization service: distributes cart items across shipping boxes",
)

if settings.cors_origin_regex:
    app.add_middleware(
        CORSMiddleware,
        allow_origin_regex=settings.cors_origin_regex,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
        max_age=3600,
    )


@app.post("/shipping/pack", response_model=PackingResult)
async def shipping_pack(request: PackRequest) -> PackingResult:
    """
    Pack cart items into boxes from the catalog.

    Input (request body):
        {
            "items": [
                {"id": "sku-1", "weight": {"value": 2, "unit": "lb"},
                 "dimensions": {"length": 4, "width": 3, "height": 2, "unit": "in"},
                 "quantity": 3}
            ],
            "availableBoxes": [
                {"id": "box-sm", "name": "Small Box",
                 "innerDimensions": {"length": 10, "width": 8, "height": 6, "unit": "in"},
                 "maxWeight": {"value": 15, "unit": "lb"}, "cost": 150}
            ]
        }

    Returns:
        The packing result (boxes, totals and unpacked items)
    """
    try:
        result = pack(request.items, request.available_boxes)
    except Exception as e:
        logger.error(f"ERROR in /shipping/pack endpoint: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))

    logger.info(
        f"packed={packed_quantity(result)}, boxes={result.total_boxes}, "
        f"unpacked={len(result.unpacked)}, "
        f"box_cost={result.total_box_cost}"
    )
    return result


@app.get("/health")
async def health() -> dict[str, Any]:
    """Health check endpoint."""
    return {"ok": True}
