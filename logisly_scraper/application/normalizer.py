"""
Row Normalizer - Raw listing rows into validated orders
"""

from datetime import datetime, timezone
from typing import Callable, Optional

from ..domain.entities import DropReason, Order, RawRow
from ..domain.exceptions import RowRejected
from .parsers import classify_tonnage, parse_currency, parse_loading_datetime, parse_route

ORDER_ID_PREFIX = "LOGISLY"
MIN_CELLS = 6

# Column positions on the open orders table
SHIPPER, DATETIME, ROUTE, VEHICLE_TYPE, PRICE, STATUS = range(MIN_CELLS)


class RowNormalizer:
    """Builds an Order from a RawRow or rejects the row with a reason"""

    def __init__(self, display_year: str, clock: Optional[Callable[[], datetime]] = None):
        self.display_year = display_year
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    def normalize(self, row: RawRow) -> Order:
        """Normalize one row, raising RowRejected when it cannot be an order"""
        if len(row) < MIN_CELLS:
            raise RowRejected(DropReason.INSUFFICIENT_CELLS, row.index)

        shipper = row.cell(SHIPPER)
        if not shipper:
            raise RowRejected(DropReason.EMPTY_SHIPPER, row.index)

        price = parse_currency(row.cell(PRICE))
        if price <= 0:
            raise RowRejected(DropReason.INVALID_PRICE, row.index)

        raw_datetime = row.cell(DATETIME)
        route = row.cell(ROUTE)
        vehicle_type = row.cell(VEHICLE_TYPE)
        origin, destination = parse_route(route)
        captured_at = self.clock()

        return Order(
            order_id=self.make_order_id(captured_at, row.index),
            shipper=shipper,
            loading_date=parse_loading_datetime(raw_datetime, self.display_year),
            origin=origin,
            destination=destination,
            route=route,
            vehicle_type=vehicle_type,
            tonnage=classify_tonnage(vehicle_type),
            offered_price=price,
            status=row.cell(STATUS),
            raw_datetime=raw_datetime,
            captured_at=captured_at,
        )

    @staticmethod
    def make_order_id(captured_at: datetime, index: int) -> str:
        # Unique within one extraction pass only
        epoch_ms = int(captured_at.timestamp() * 1000)
        return f"{ORDER_ID_PREFIX}-{epoch_ms}-{index}"
