"""FastAPI HTTP endpoints for the LiteLLM formatter.

This module exposes the batch runner and the normalizer over REST.
Mount the router on an application::

    app = FastAPI()
    app.include_router(router, prefix="/formatter")
"""

from typing import Any, Dict, List

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from ..batch.runner import BatchRunner
from ..core.normalization import normalize_response
from ..errors import FormatterError
from ..models.options import FormatterOptions
from ..observability.logging import FormatterLogger


router = APIRouter()

logger = FormatterLogger("http")


class FormatRequest(BaseModel):
    """Request body for batch formatting."""
    items: List[Dict[str, Any]] = Field(default_factory=list)
    options: FormatterOptions = Field(default_factory=FormatterOptions)


class NormalizeRequest(BaseModel):
    """Request body for single-document normalization."""
    document: Any = None
    strict: bool = False


@router.post("/format")
async def format_batch(request: FormatRequest) -> Dict[str, Any]:
    """Format a batch of workflow items."""
    runner = BatchRunner(request.options, logger=FormatterLogger("batch"))
    try:
        return {"items": runner.run_raw(request.items)}
    except FormatterError as e:
        raise HTTPException(status_code=422, detail=e.to_dict())
    except Exception as e:
        logger.error("Unhandled error formatting batch", error=e)
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/normalize")
async def normalize_document(request: NormalizeRequest) -> Dict[str, Any]:
    """Normalize a single response document."""
    try:
        return {"document": normalize_response(request.document, strict=request.strict)}
    except FormatterError as e:
        raise HTTPException(status_code=422, detail=e.to_dict())
    except Exception as e:
        logger.error("Unhandled error normalizing document", error=e)
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/defaults")
async def default_options() -> Dict[str, Any]:
    """Return the default formatting options."""
    return FormatterOptions().to_parameters()


__all__ = ["router", "FormatRequest", "NormalizeRequest"]
