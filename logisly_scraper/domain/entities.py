"""
Domain Entities - Core business objects
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple


ORDER_SOURCE = "Logisly Open Orders"
CARGO_TYPE = "General Cargo"


class DropReason(str, Enum):
    """Why a raw row did not become an order"""
    EMPTY_SHIPPER = "EmptyShipper"
    INVALID_PRICE = "InvalidPrice"
    INSUFFICIENT_CELLS = "InsufficientCells"


class ScrapeStage(str, Enum):
    """Stages of one scrape run, in the order they are reached"""
    IDLE = "Idle"
    SESSION_ACQUIRED = "SessionAcquired"
    AUTHENTICATED = "Authenticated"
    NAVIGATED = "Navigated"
    EXTRACTED = "Extracted"
    COMPLETED = "Completed"
    FAILED = "Failed"


@dataclass(frozen=True)
class RawRow:
    """Trimmed cell texts of one listing row, as captured"""
    cells: Tuple[str, ...]
    index: int

    def __len__(self) -> int:
        return len(self.cells)

    def cell(self, position: int) -> str:
        if position < len(self.cells):
            return self.cells[position]
        return ""


@dataclass(frozen=True)
class LoadingDate:
    """Loading date as shown on the listing"""
    day: str = ""
    month: str = ""
    year: str = ""
    time: str = ""

    @property
    def display(self) -> str:
        # Rendered literally, empty parts included, for caller compatibility
        return f"{self.day} {self.month} {self.year}"


@dataclass(frozen=True)
class Order:
    """A normalized open freight order"""
    order_id: str
    shipper: str
    loading_date: LoadingDate
    origin: str
    destination: str
    route: str
    vehicle_type: str
    tonnage: int
    offered_price: int
    status: str
    raw_datetime: str
    captured_at: datetime
    source: str = ORDER_SOURCE

    def __post_init__(self):
        if not self.shipper:
            raise ValueError("Order shipper cannot be empty")
        if self.offered_price <= 0:
            raise ValueError(f"Order price must be positive, got {self.offered_price}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            'jobId': self.order_id,
            'shipper': self.shipper,
            'tanggal': self.loading_date.display,
            'jamMuat': self.loading_date.time,
            'jam': self.loading_date.time,
            'asal': self.origin,
            'tujuan': self.destination,
            'rute': self.route,
            'tipeTruk': self.vehicle_type,
            'jenisKendaraan': self.vehicle_type,
            'hargaPenawaran': self.offered_price,
            'harga': self.offered_price,
            'tonase': self.tonnage,
            'status': self.status,
            'keterangan': self.status,
            'contact': self.shipper,
            'deadline': self.raw_datetime,
            'jenisBarang': CARGO_TYPE,
            'source': self.source,
            'timestamp': format_timestamp(self.captured_at),
        }


@dataclass(frozen=True)
class ScrapeResult:
    """Outcome of one scrape run"""
    success: bool
    orders: Tuple[Order, ...] = ()
    scraped_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    error: Optional[str] = None
    failed_stage: Optional[ScrapeStage] = None
    dropped: Mapping[DropReason, int] = field(default_factory=dict)
    duration_seconds: Optional[float] = None
    source: str = ORDER_SOURCE

    @classmethod
    def completed(
        cls,
        orders,
        dropped: Optional[Mapping[DropReason, int]] = None,
        duration_seconds: Optional[float] = None,
    ) -> "ScrapeResult":
        return cls(
            success=True,
            orders=tuple(orders),
            dropped=dict(dropped or {}),
            duration_seconds=duration_seconds,
        )

    @classmethod
    def failed(
        cls,
        error: str,
        stage: ScrapeStage,
        duration_seconds: Optional[float] = None,
    ) -> "ScrapeResult":
        return cls(
            success=False,
            error=error,
            failed_stage=stage,
            duration_seconds=duration_seconds,
        )

    @property
    def stage(self) -> ScrapeStage:
        """Terminal stage of the run"""
        return ScrapeStage.COMPLETED if self.success else ScrapeStage.FAILED

    @property
    def total_orders(self) -> int:
        return len(self.orders)

    @property
    def total_dropped(self) -> int:
        return sum(self.dropped.values())

    def to_dict(self) -> Dict[str, Any]:
        if not self.success:
            return {
                'success': False,
                'error': self.error,
                'orders': [],
                'scrapedAt': format_timestamp(self.scraped_at),
            }
        return {
            'success': True,
            'orders': [order.to_dict() for order in self.orders],
            'totalOrders': self.total_orders,
            'scrapedAt': format_timestamp(self.scraped_at),
            'source': self.source,
        }


def format_timestamp(moment: datetime) -> str:
    """ISO 8601 in UTC with a trailing Z, e.g. 2025-01-10T08:00:00.000Z"""
    moment = moment.astimezone(timezone.utc)
    return moment.strftime('%Y-%m-%dT%H:%M:%S.') + f"{moment.microsecond // 1000:03d}Z"
