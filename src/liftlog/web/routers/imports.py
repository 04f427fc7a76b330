"""Setgraph import routes."""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from ...db import Storage
from ...models.setgraph import SetgraphExerciseMapping
from ...services.setgraph_import import (
    SetgraphValidationError,
    import_setgraph_csv,
    preview_setgraph_import,
)
from ..dependencies import get_storage

router = APIRouter(prefix="/import", tags=["import"])


class MappingPayload(BaseModel):
    setgraph_name: str
    exercise_id: str | None = None


class SetgraphPreviewRequest(BaseModel):
    """CSV text of a Setgraph export."""

    csv: str


class SetgraphImportRequest(BaseModel):
    """CSV text plus the confirmed mappings.

    When ``mappings`` is omitted the proposed mappings are used as-is.
    """

    csv: str
    mappings: list[MappingPayload] | None = None


@router.post("/setgraph/preview")
async def preview_setgraph(
    payload: SetgraphPreviewRequest,
    storage: Storage = Depends(get_storage),
) -> dict:
    """Validate a Setgraph CSV and propose exercise mappings."""
    preview = await preview_setgraph_import(payload.csv, storage)
    return preview.to_dict()


@router.post("/setgraph")
async def import_setgraph(
    payload: SetgraphImportRequest,
    storage: Storage = Depends(get_storage),
) -> dict:
    """Import a Setgraph CSV.

    Raises:
        HTTPException: 422 if the CSV fails validation
    """
    if payload.mappings is None:
        preview = await preview_setgraph_import(payload.csv, storage)
        mappings = preview.mappings
    else:
        mappings = [
            SetgraphExerciseMapping(
                setgraph_name=m.setgraph_name,
                exercise_id=m.exercise_id or None,
            )
            for m in payload.mappings
        ]

    try:
        result = await import_setgraph_csv(payload.csv, mappings, storage)
    except SetgraphValidationError as e:
        raise HTTPException(
            status_code=422,
            detail={"errors": e.errors},
        ) from e

    return result.to_dict()
