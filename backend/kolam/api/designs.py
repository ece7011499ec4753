"""/api/designs: CRUD over saved kolam designs."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from kolam.dependencies import get_store
from kolam.models.design import Design, DesignCreate, DesignUpdate
from kolam.models.responses import DeleteResponse
from kolam.store.designs import DesignStore

router = APIRouter(prefix="/designs")


def _not_found() -> HTTPException:
    return HTTPException(status_code=404, detail="Design not found")


@router.get("", response_model=list[Design])
async def list_designs(store: DesignStore = Depends(get_store)) -> list[Design]:
    return store.find()


@router.get("/{design_id}", response_model=Design)
async def get_design(design_id: str, store: DesignStore = Depends(get_store)) -> Design:
    design = store.find_by_id(design_id)
    if design is None:
        raise _not_found()
    return design


@router.post("", response_model=Design, status_code=201)
async def create_design(req: DesignCreate, store: DesignStore = Depends(get_store)) -> Design:
    return store.create(req)


@router.put("/{design_id}", response_model=Design)
async def update_design(
    design_id: str,
    req: DesignUpdate,
    store: DesignStore = Depends(get_store),
) -> Design:
    design = store.update(design_id, req)
    if design is None:
        raise _not_found()
    return design


@router.delete("/{design_id}", response_model=DeleteResponse)
async def delete_design(design_id: str, store: DesignStore = Depends(get_store)) -> DeleteResponse:
    if not store.delete(design_id):
        raise _not_found()
    return DeleteResponse(message="Design deleted", success=True)
