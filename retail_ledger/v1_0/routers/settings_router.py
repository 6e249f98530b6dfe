from fastapi import APIRouter, HTTPException, Depends
from dependency_injector.wiring import inject, Provide

from retail_ledger.app_containers import ApplicationContainer
from retail_ledger.core.errors import LedgerError
from retail_ledger.core.logger import logger

from retail_ledger.v1_0.schemas import TaxRateUpdate
from retail_ledger.v1_0.services import InvoiceService

router = APIRouter(prefix="/settings", tags=["Settings"])

@router.get("/tax-rate", summary="Current tax rate")
@inject
def get_tax_rate(
    service: InvoiceService = Depends(
        Provide[ApplicationContainer.api_container.invoice_service]
    ),
):
    return {"tax_rate": service.tax_rate}

@router.put("/tax-rate", summary="Set tax rate as a percentage")
@inject
def set_tax_rate(
    request: TaxRateUpdate,
    service: InvoiceService = Depends(
        Provide[ApplicationContainer.api_container.invoice_service]
    ),
):
    logger.info(f"[SettingsRouter] tax-rate percent={request.percent}")
    try:
        return {"tax_rate": service.set_tax_rate(request.percent)}
    except LedgerError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
