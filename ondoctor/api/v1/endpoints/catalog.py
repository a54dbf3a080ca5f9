"""Catalog endpoints."""

from fastapi import APIRouter, status

from ondoctor.schemas.catalog import CatalogListResponse, DepartmentListResponse
from ondoctor.services.catalog_service import CatalogService

router = APIRouter()


@router.get(
    "/departments",
    response_model=DepartmentListResponse,
    status_code=status.HTTP_200_OK,
    summary="List departments",
)
async def list_departments() -> DepartmentListResponse:
    return CatalogService.list_departments()


@router.get(
    "/surgeries",
    response_model=CatalogListResponse,
    status_code=status.HTTP_200_OK,
    summary="List popular surgeries",
)
async def list_surgeries() -> CatalogListResponse:
    return CatalogService.list_surgeries()


@router.get(
    "/health-concerns",
    response_model=CatalogListResponse,
    status_code=status.HTTP_200_OK,
    summary="List common health concerns",
)
async def list_health_concerns() -> CatalogListResponse:
    return CatalogService.list_health_concerns()
