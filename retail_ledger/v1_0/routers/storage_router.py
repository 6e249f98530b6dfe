from fastapi import APIRouter, Depends
from dependency_injector.wiring import inject, Provide

from retail_ledger.app_containers import ApplicationContainer
from retail_ledger.core.logger import logger

from retail_ledger.v1_0.entities import LoadReportDTO, SaveReportDTO
from retail_ledger.v1_0.services import PersistenceService

router = APIRouter(prefix="/storage", tags=["Storage"])

@router.post("/load", response_model=LoadReportDTO, summary="Reload all collections from disk")
@inject
def load_all(
    service: PersistenceService = Depends(
        Provide[ApplicationContainer.api_container.persistence_service]
    ),
):
    logger.info("[StorageRouter] load")
    return service.load_all()

@router.post("/save", response_model=SaveReportDTO, summary="Write all collections to disk")
@inject
def save_all(
    service: PersistenceService = Depends(
        Provide[ApplicationContainer.api_container.persistence_service]
    ),
):
    logger.info("[StorageRouter] save")
    return service.save_all()
