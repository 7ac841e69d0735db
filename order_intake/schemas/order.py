import enum

from pydantic import BaseModel, Field

UNKNOWN_COMPANY = "Unknown company"


class CustomerSide(str, enum.Enum):
    """Which party of the transport the customer is."""

    SHIPPER = "shipper"
    CONSIGNEE = "consignee"
    NONE = "none"


class PackageType(str, enum.Enum):
    """Canonical package-type codes used on cargo entries."""

    EPAL = "EPAL"
    PALLET = "pallet"
    PALLET_OTHER = "pallet_other"
    CARTON = "carton"
    OTHER = "other"


# --- Customer ---


class CompanyDetails(BaseModel):
    company: str = Field(..., min_length=1, description="Customer company name")


class Customer(BaseModel):
    side: CustomerSide = Field(CustomerSide.NONE, description="Customer role in the transport")
    details: CompanyDetails


# --- Locations ---


class CompanyAddress(BaseModel):
    company: str = Field(UNKNOWN_COMPANY, description="Company at the loading/unloading place")


class LocationTime(BaseModel):
    datetime_from: str = Field(..., description="ISO-8601 start of the time window")


class LocationEntry(BaseModel):
    """A loading or destination place assembled from a context window."""

    company_address: CompanyAddress = Field(default_factory=CompanyAddress)
    time: LocationTime | None = Field(None, description="Only present when a date was found")


# --- Cargo ---


class CargoEntry(BaseModel):
    title: str = Field(..., description="Free-text cargo description")
    package_count: int = Field(..., gt=0, description="Number of packages")
    package_type: PackageType = Field(PackageType.OTHER, description="Canonical package type")

    @classmethod
    def general_cargo(cls) -> "CargoEntry":
        """The synthetic entry used when no cargo line was recognized."""
        return cls(title="General cargo", package_count=1, package_type=PackageType.OTHER)


class FreightData(BaseModel):
    freight_price: float = Field(..., description="Agreed freight amount")
    freight_currency: str = Field(..., min_length=3, max_length=3, description="ISO currency code")


# --- Merged record ---


class ExtractedRecord(BaseModel):
    """Order data recovered from one document, ready for order creation."""

    customer: Customer
    order_reference: str = Field(..., min_length=1)
    loading_locations: list[LocationEntry] = Field(..., min_length=1)
    destination_locations: list[LocationEntry] = Field(..., min_length=1)
    cargos: list[CargoEntry] = Field(default_factory=lambda: [CargoEntry.general_cargo()], min_length=1)
    transport_numbers: str | None = Field(None, description="Slash-joined unique transport codes")
    freight_price: float | None = None
    freight_currency: str | None = None
    attachment_filenames: list[str] = Field(default_factory=lambda: [""])

    def to_order_payload(self) -> dict:
        """JSON-ready payload for the order-creation service, absent fields omitted."""
        return self.model_dump(mode="json", exclude_none=True)
