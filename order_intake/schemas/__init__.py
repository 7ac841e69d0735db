from order_intake.schemas.order import (
    CargoEntry,
    CompanyAddress,
    CompanyDetails,
    Customer,
    CustomerSide,
    ExtractedRecord,
    FreightData,
    LocationEntry,
    LocationTime,
    PackageType,
)

__all__ = [
    "CargoEntry",
    "CompanyAddress",
    "CompanyDetails",
    "Customer",
    "CustomerSide",
    "ExtractedRecord",
    "FreightData",
    "LocationEntry",
    "LocationTime",
    "PackageType",
]
