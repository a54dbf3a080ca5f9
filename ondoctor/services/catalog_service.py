"""Static departments and surgeries catalog."""

from ondoctor.schemas.catalog import (
    CatalogEntry,
    CatalogListResponse,
    Department,
    DepartmentListResponse,
)

DEPARTMENTS = (
    ("General Surgery", 9),
    ("Proctology", 5),
    ("Ophthalmology", 4),
    ("Urology", 12),
    ("Cosmetic Surgery", 6),
    ("Orthopedics", 8),
    ("Advanced Cosmetic Procedures", 12),
)

POPULAR_SURGERIES = (
    "Piles",
    "Hernia Treatment",
    "Kidney Stone",
    "Cataract",
    "Circumcision",
    "Lasik",
    "Varicose Veins",
    "Gallstone",
    "Anal Fistula",
    "Gynaecomastia",
    "Anal Fissure",
    "Lipoma Removal",
    "Sebaceous Cyst",
    "Pilonidal Sinus",
    "Lump in Breast",
    "TURP",
    "Hydrocele",
    "Knee Replacement",
    "Hair Transplant",
)

HEALTH_CONCERNS = (
    "Fatigue & Weakness",
    "Digestive Issues",
    "Breathing Problems",
    "Joint Pain",
    "Skin Conditions",
    "Headaches & Migraines",
)


class CatalogService:
    """Read-only catalog lookups."""

    @staticmethod
    def list_departments() -> DepartmentListResponse:
        items = [Department(name=name, ailments_count=count) for name, count in DEPARTMENTS]
        return DepartmentListResponse(total=len(items), items=items)

    @staticmethod
    def list_surgeries() -> CatalogListResponse:
        items = [CatalogEntry(name=name) for name in POPULAR_SURGERIES]
        return CatalogListResponse(total=len(items), items=items)

    @staticmethod
    def list_health_concerns() -> CatalogListResponse:
        items = [CatalogEntry(name=name) for name in HEALTH_CONCERNS]
        return CatalogListResponse(total=len(items), items=items)
