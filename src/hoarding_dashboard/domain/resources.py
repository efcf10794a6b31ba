"""Wire models for hoarding dashboard resources."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Generic, TypeVar

from pydantic import Field

from hoarding_dashboard.domain.envelope import ApiModel

T = TypeVar("T")


class HoardingStatus(StrEnum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    MAINTENANCE = "maintenance"


class ContractStatus(StrEnum):
    PENDING = "pending"
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class PaymentStatus(StrEnum):
    PENDING = "pending"
    PAID = "paid"
    OVERDUE = "overdue"
    CANCELLED = "cancelled"


class AssignmentStatus(StrEnum):
    ASSIGNED = "assigned"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class PhotoStatus(StrEnum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class Coordinates(ApiModel):
    latitude: float
    longitude: float


class HoardingLocation(ApiModel):
    """Street location of a hoarding."""

    address: str = ""
    city: str = ""
    state: str = ""
    country: str = ""
    zip_code: str = ""
    coordinates: Coordinates | None = None


class HoardingSize(ApiModel):
    width: float = 0
    height: float = 0
    unit: str = "feet"


class Hoarding(ApiModel):
    """A billboard structure available for lease."""

    id: str = Field(alias="_id")
    name: str
    location: HoardingLocation = Field(default_factory=HoardingLocation)
    size: HoardingSize = Field(default_factory=HoardingSize)
    daily_rate: float = 0
    status: str = HoardingStatus.ACTIVE
    images: list[str] = Field(default_factory=list)
    owner: Any = None
    created_at: str | None = None
    updated_at: str | None = None


class PartyRef(ApiModel):
    """Embedded reference to a user on another record."""

    id: str = Field(alias="_id")
    name: str = ""
    email: str | None = None
    phone: str | None = None


class Contract(ApiModel):
    """Lease of a hoarding to a client for a date range."""

    id: str = Field(alias="_id")
    contract_number: str | None = None
    hoarding: Any = None
    client: Any = None
    owner: Any = None
    start_date: str | None = None
    end_date: str | None = None
    total_amount: float = 0
    status: str = ContractStatus.PENDING
    terms_and_conditions: str | None = None


class Invoice(ApiModel):
    """Billing record raised against a contract."""

    id: str = Field(alias="_id")
    invoice_number: str | None = None
    contract: Any = None
    client: Any = None
    amount: float = 0
    payment_status: str = PaymentStatus.PENDING
    due_date: str | None = None
    payment_date: str | None = None
    payment_method: str | None = None
    transaction_id: str | None = None
    notes: str | None = None


class BillingAnalytics(ApiModel):
    total_amount: float = 0
    paid_amount: float = 0
    pending_amount: float = 0
    overdue_amount: float = 0
    invoices_by_status: dict[str, int] = Field(default_factory=dict)
    recent_invoices: list[Invoice] = Field(default_factory=list)
    upcoming_invoices: list[Invoice] = Field(default_factory=list)


class Photo(ApiModel):
    """Photo of a hoarding uploaded by a photographer."""

    id: str = Field(alias="_id")
    file_path: str | None = None
    image_url: str | None = None
    url: str | None = None
    hoarding: Any = None
    uploaded_by: Any = None
    assignment: Any = None
    description: str | None = None
    caption: str | None = None
    taken_at: str | None = None
    status: str = PhotoStatus.PENDING


class Assignment(ApiModel):
    """Task directing a photographer to shoot a hoarding by a due date."""

    id: str = Field(alias="_id")
    hoarding: Any = None
    photographer: Any = None
    assigned_by: Any = None
    status: str = AssignmentStatus.ASSIGNED
    due_date: str | None = None
    notes: str | None = None


class Photographer(ApiModel):
    id: str = Field(alias="_id")
    name: str = ""
    email: str = ""
    phone: str | None = None
    location: str | None = None
    avatar: str | None = None
    status: str = "active"
    assigned_hoardings: int | None = None
    photos_uploaded: int | None = None


class PhotographerStats(ApiModel):
    """Counters shown on the photographer dashboard."""

    assigned_hoardings: int = 0
    locations: int = 0
    photos_uploaded: int = 0
    this_month: int = 0
    pending_uploads: int = 0
    due_soon: int = 0
    image_quality_score: float = 0
    last_fifty_uploads: int = 0


class Client(ApiModel):
    id: str = Field(alias="_id")
    name: str = ""
    email: str = ""
    phone: str | None = None
    location: str | None = None
    avatar: str | None = None
    company_name: str | None = None
    website: str | None = None
    address: str | None = None
    status: str = "active"
    contact_person: str | None = None
    hoardings_count: int | None = None
    contracts_count: int | None = None


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a paginated listing."""

    items: list[T]
    total: int
    page: int
    limit: int
    pages: int
