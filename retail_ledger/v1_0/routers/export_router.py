from typing import Literal
from fastapi import APIRouter, Depends, Query, HTTPException
from dependency_injector.wiring import inject, Provide

from retail_ledger.app_containers import ApplicationContainer
from retail_ledger.v1_0.services import ExportService

Fmt = Literal["csv", "xlsx"]

router = APIRouter(
    prefix="/export",
    tags=["Export"],
    responses={200: {"content": {
        "text/csv": {},
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet": {}
    }}},
)

@router.get("/{entity}", summary="Export customers/invoices/inventory")
@inject
def export_any(
    entity: str,
    fmt: Fmt = Query("csv"),
    svc: ExportService = Depends(Provide[ApplicationContainer.api_container.export_service]),
):
    if entity == "customers":
        return svc.export_customers(fmt)
    if entity == "invoices":
        return svc.export_invoices(fmt)
    if entity == "inventory":
        return svc.export_inventory(fmt)
    raise HTTPException(status_code=400, detail="Unsupported entity")
