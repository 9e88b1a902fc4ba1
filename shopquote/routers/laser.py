from fastapi import APIRouter, Depends
from typing import List

from .. import schemas
from ..config_store import LaserConfigStore, get_config_store
from ..material_catalog import MaterialCatalog, get_catalog

router = APIRouter(prefix="/laser", tags=["laser"])


@router.get("/config", response_model=schemas.LaserConfigOut)
def get_laser_config(config: LaserConfigStore = Depends(get_config_store)):
    return schemas.LaserConfigOut.model_validate(config.snapshot())


@router.put("/config", response_model=schemas.LaserConfigOut)
def update_laser_config(
    update: schemas.LaserConfigUpdate,
    config: LaserConfigStore = Depends(get_config_store),
):
    """Partial update — omitted keys keep their current value."""
    values = update.model_dump(exclude_none=True)
    return schemas.LaserConfigOut.model_validate(config.update(**values))


@router.get("/materials", response_model=List[schemas.MaterialOut])
def list_materials(include_inactive: bool = False, catalog: MaterialCatalog = Depends(get_catalog)):
    return [schemas.MaterialOut.model_validate(m) for m in catalog.list_materials(include_inactive)]


@router.get("/materials/{material_id}", response_model=schemas.MaterialOut)
def get_material(material_id: str, catalog: MaterialCatalog = Depends(get_catalog)):
    return schemas.MaterialOut.model_validate(catalog.get_active_material_by_id(material_id))


@router.post("/materials", response_model=schemas.MaterialOut, status_code=201)
def create_material(material: schemas.MaterialCreate, catalog: MaterialCatalog = Depends(get_catalog)):
    return schemas.MaterialOut.model_validate(catalog.add_material(**material.model_dump()))


@router.put("/materials/{material_id}", response_model=schemas.MaterialOut)
@router.patch("/materials/{material_id}", response_model=schemas.MaterialOut)
def update_material(
    material_id: str,
    update: schemas.MaterialUpdate,
    catalog: MaterialCatalog = Depends(get_catalog),
):
    """Only the fields present in the body change."""
    changes = {
        k: v for k, v in update.model_dump(exclude_unset=True).items()
        if v is not None or k in ("color", "finish")
    }
    return schemas.MaterialOut.model_validate(catalog.update_material(material_id, **changes))


@router.delete("/materials/{material_id}", response_model=schemas.MaterialOut)
def delete_material(material_id: str, catalog: MaterialCatalog = Depends(get_catalog)):
    """Soft delete — the material is deactivated, existing quotes keep their record."""
    return schemas.MaterialOut.model_validate(catalog.deactivate_material(material_id))
