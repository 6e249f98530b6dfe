from typing import List
from fastapi import APIRouter, HTTPException, Depends, status
from dependency_injector.wiring import inject, Provide

from retail_ledger.app_containers import ApplicationContainer
from retail_ledger.core.errors import LedgerError
from retail_ledger.core.logger import logger

from retail_ledger.v1_0.schemas import CustomerCreate, CustomerUpdate, PointsAdjust
from retail_ledger.v1_0.entities import CustomerDTO, InvoiceDTO, PointsChangeDTO
from retail_ledger.v1_0.services import CustomerService, InvoiceService

router = APIRouter(prefix="/customers", tags=["Customers"])

@router.post(
    "",
    response_model=CustomerDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new customer",
)
@inject
def create_customer(
    request: CustomerCreate,
    service: CustomerService = Depends(
        Provide[ApplicationContainer.api_container.customer_service]
    ),
) -> CustomerDTO:
    logger.info(
        "[CustomerRouter] create payload=%s",
        request.model_dump(),
    )
    try:
        return service.create(request)
    except LedgerError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(
            "[CustomerRouter] create error: %s",
            e,
            exc_info=True,
        )
        raise HTTPException(
            status_code=500,
            detail="Failed to create customer",
        )

@router.get(
    "",
    response_model=List[CustomerDTO],
    summary="List customers in registry order",
)
@inject
def list_customers(
    service: CustomerService = Depends(
        Provide[ApplicationContainer.api_container.customer_service]
    ),
):
    try:
        return service.list_all()
    except Exception as e:
        logger.error(f"[CustomerRouter] list error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to list customers")

@router.get(
    "/by-id/{customer_id}",
    response_model=CustomerDTO,
    summary="Get customer by ID",
)
@inject
def get_customer(
    customer_id: str,
    service: CustomerService = Depends(
        Provide[ApplicationContainer.api_container.customer_service]
    ),
):
    logger.debug(f"[CustomerRouter] get id={customer_id}")
    try:
        return service.get(customer_id)
    except LedgerError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"[CustomerRouter] get error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch customer")

@router.get(
    "/by-phone/{phone}",
    response_model=CustomerDTO,
    summary="Get customer by phone (case-insensitive)",
)
@inject
def get_customer_by_phone(
    phone: str,
    service: CustomerService = Depends(
        Provide[ApplicationContainer.api_container.customer_service]
    ),
):
    c = service.find_by_phone(phone)
    if not c:
        raise HTTPException(status_code=404, detail="Customer not found")
    return c

@router.patch(
    "/{customer_id}",
    response_model=CustomerDTO,
    summary="Edit customer",
)
@inject
def update_customer(
    customer_id: str,
    request: CustomerUpdate,
    service: CustomerService = Depends(
        Provide[ApplicationContainer.api_container.customer_service]
    ),
):
    logger.info(
        "[CustomerRouter] update id=%s payload=%s",
        customer_id, request.model_dump(exclude_unset=True),
    )
    try:
        return service.edit(customer_id, request)
    except LedgerError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"[CustomerRouter] update error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to update customer")

@router.delete(
    "/{customer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove customer (invoices are kept)",
)
@inject
def delete_customer(
    customer_id: str,
    service: CustomerService = Depends(
        Provide[ApplicationContainer.api_container.customer_service]
    ),
):
    logger.info(f"[CustomerRouter] delete id={customer_id}")
    try:
        service.remove(customer_id)
    except LedgerError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"[CustomerRouter] delete error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to delete customer")

@router.post(
    "/{customer_id}/points",
    response_model=PointsChangeDTO,
    summary="Add, subtract or set loyalty points",
)
@inject
def change_points(
    customer_id: str,
    request: PointsAdjust,
    service: CustomerService = Depends(
        Provide[ApplicationContainer.api_container.customer_service]
    ),
):
    logger.info(
        "[CustomerRouter] points id=%s mode=%s amount=%s",
        customer_id, request.mode, request.amount,
    )
    try:
        return service.change_points(customer_id, request)
    except LedgerError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"[CustomerRouter] points error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to change points")

@router.get(
    "/{customer_id}/invoices",
    response_model=List[InvoiceDTO],
    summary="Invoices referencing a customer",
)
@inject
def list_customer_invoices(
    customer_id: str,
    service: InvoiceService = Depends(
        Provide[ApplicationContainer.api_container.invoice_service]
    ),
):
    return service.find_by_customer(customer_id)
