from typing import List
from fastapi import APIRouter, HTTPException, Depends
from dependency_injector.wiring import inject, Provide

from retail_ledger.app_containers import ApplicationContainer
from retail_ledger.core.errors import LedgerError

from retail_ledger.v1_0.entities import InventoryItemDTO
from retail_ledger.v1_0.services import InventoryService

router = APIRouter(prefix="/inventory", tags=["Inventory"])

@router.get("", response_model=List[InventoryItemDTO], summary="List the catalog")
@inject
def list_inventory(
    service: InventoryService = Depends(
        Provide[ApplicationContainer.api_container.inventory_service]
    ),
):
    return service.list_all()

@router.get("/{item_index}", response_model=InventoryItemDTO, summary="Get a catalog item by position")
@inject
def get_inventory_item(
    item_index: int,
    service: InventoryService = Depends(
        Provide[ApplicationContainer.api_container.inventory_service]
    ),
):
    try:
        return service.get(item_index)
    except LedgerError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
