from decimal import Decimal
from typing import List
from fastapi import APIRouter, HTTPException, Depends, Query, status
from dependency_injector.wiring import inject, Provide

from retail_ledger.app_containers import ApplicationContainer
from retail_ledger.core.errors import LedgerError
from retail_ledger.core.logger import logger

from retail_ledger.v1_0.schemas import InvoiceCreate, InvoiceQuoteRequest
from retail_ledger.v1_0.entities import InvoiceReceiptDTO, InvoiceViewDTO, QuoteDTO
from retail_ledger.v1_0.services import InvoiceService

router = APIRouter(prefix="/invoices", tags=["Invoices"])

@router.post(
    "/quote",
    response_model=QuoteDTO,
    summary="Price invoice lines at the current tax rate",
)
@inject
def quote_invoice(
    request: InvoiceQuoteRequest,
    service: InvoiceService = Depends(
        Provide[ApplicationContainer.api_container.invoice_service]
    ),
):
    try:
        return service.quote_items(request.items)
    except LedgerError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"[InvoiceRouter] quote error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to quote invoice")

@router.get(
    "/loyalty/{customer_id}",
    summary="Maximum points redeemable against a total",
)
@inject
def max_redeemable(
    customer_id: str,
    total: Decimal = Query(..., ge=0),
    service: InvoiceService = Depends(
        Provide[ApplicationContainer.api_container.invoice_service]
    ),
):
    try:
        return {
            "customer_id": customer_id,
            "max_points": service.max_redeemable_points(customer_id, total),
        }
    except LedgerError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

@router.post(
    "",
    response_model=InvoiceReceiptDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Finalize an invoice",
)
@inject
def create_invoice(
    request: InvoiceCreate,
    service: InvoiceService = Depends(
        Provide[ApplicationContainer.api_container.invoice_service]
    ),
):
    logger.info(
        "[InvoiceRouter] create payload=%s",
        request.model_dump(),
    )
    try:
        return service.checkout(request)
    except LedgerError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(
            "[InvoiceRouter] create error: %s",
            e,
            exc_info=True,
        )
        raise HTTPException(status_code=500, detail="Failed to create invoice")

@router.get(
    "",
    response_model=List[InvoiceViewDTO],
    summary="List invoices with customer name and phone",
)
@inject
def list_invoices(
    service: InvoiceService = Depends(
        Provide[ApplicationContainer.api_container.invoice_service]
    ),
):
    try:
        return service.list_views()
    except Exception as e:
        logger.error(f"[InvoiceRouter] list error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to list invoices")
