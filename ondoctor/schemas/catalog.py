"""Catalog schemas."""

from pydantic import BaseModel


class Department(BaseModel):
    """Medical department."""

    name: str
    ailments_count: int


class CatalogEntry(BaseModel):
    """Named catalog item such as a surgery or a health concern."""

    name: str


class DepartmentListResponse(BaseModel):
    total: int
    items: list[Department]


class CatalogListResponse(BaseModel):
    total: int
    items: list[CatalogEntry]
