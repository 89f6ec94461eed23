"""RowNormalizer unit tests."""

from datetime import datetime, timezone

import pytest

from logisly_scraper.application.normalizer import RowNormalizer
from logisly_scraper.domain.entities import DropReason, Order, RawRow
from logisly_scraper.domain.exceptions import RowRejected

CAPTURED_AT = datetime(2025, 1, 9, 23, 0, 0, tzinfo=timezone.utc)


def _normalizer() -> RowNormalizer:
    return RowNormalizer(display_year="2025", clock=lambda: CAPTURED_AT)


def _row(*cells, index=0) -> RawRow:
    return RawRow(cells=tuple(cells), index=index)


ROW_A = ("Shipper X", "10 Januari 08:00", "Jakarta - Bandung", "CDE", "Rp 500.000", "Open")


class TestNormalize:

    def test_valid_row(self):
        order = _normalizer().normalize(_row(*ROW_A, index=4))

        assert order.shipper == "Shipper X"
        assert order.offered_price == 500000
        assert order.tonnage == 3
        assert order.origin == "Jakarta"
        assert order.destination == "Bandung"
        assert order.route == "Jakarta - Bandung"
        assert order.vehicle_type == "CDE"
        assert order.status == "Open"
        assert order.raw_datetime == "10 Januari 08:00"
        assert order.loading_date.display == "10 Januari 2025"
        assert order.loading_date.time == "08:00"
        assert order.captured_at == CAPTURED_AT

    def test_order_id_is_prefix_millis_index(self):
        order = _normalizer().normalize(_row(*ROW_A, index=4))
        assert order.order_id == f"LOGISLY-{int(CAPTURED_AT.timestamp() * 1000)}-4"

    def test_order_ids_unique_within_pass(self):
        normalizer = _normalizer()
        ids = {normalizer.normalize(_row(*ROW_A, index=i)).order_id for i in range(5)}
        assert len(ids) == 5

    def test_extra_cells_ignored(self):
        order = _normalizer().normalize(_row(*ROW_A, "Detail", "…"))
        assert order.status == "Open"

    @pytest.mark.parametrize("cell_count", [0, 1, 5])
    def test_short_rows_rejected(self, cell_count):
        with pytest.raises(RowRejected) as excinfo:
            _normalizer().normalize(_row(*ROW_A[:cell_count]))
        assert excinfo.value.reason is DropReason.INSUFFICIENT_CELLS

    def test_empty_shipper_rejected(self):
        with pytest.raises(RowRejected) as excinfo:
            _normalizer().normalize(_row("", *ROW_A[1:]))
        assert excinfo.value.reason is DropReason.EMPTY_SHIPPER

    def test_empty_shipper_checked_before_price(self):
        row = _row("", "5 Februari 10:00", "Solo - Semarang", "Tronton", "", "")
        with pytest.raises(RowRejected) as excinfo:
            _normalizer().normalize(row)
        assert excinfo.value.reason is DropReason.EMPTY_SHIPPER

    @pytest.mark.parametrize("price", ["", "Rp 0", "Nego"])
    def test_non_positive_price_rejected(self, price):
        row = _row("Shipper X", "10 Januari 08:00", "Jakarta - Bandung", "CDE", price, "Open")
        with pytest.raises(RowRejected) as excinfo:
            _normalizer().normalize(row)
        assert excinfo.value.reason is DropReason.INVALID_PRICE


class TestOrderDict:

    def test_caller_field_names(self):
        data = _normalizer().normalize(_row(*ROW_A, index=0)).to_dict()

        assert data["jobId"].startswith("LOGISLY-")
        assert data["shipper"] == data["contact"] == "Shipper X"
        assert data["tanggal"] == "10 Januari 2025"
        assert data["jamMuat"] == data["jam"] == "08:00"
        assert data["asal"] == "Jakarta"
        assert data["tujuan"] == "Bandung"
        assert data["rute"] == "Jakarta - Bandung"
        assert data["tipeTruk"] == data["jenisKendaraan"] == "CDE"
        assert data["hargaPenawaran"] == data["harga"] == 500000
        assert data["tonase"] == 3
        assert data["status"] == data["keterangan"] == "Open"
        assert data["deadline"] == "10 Januari 08:00"
        assert data["jenisBarang"] == "General Cargo"
        assert data["source"] == "Logisly Open Orders"
        assert data["timestamp"] == "2025-01-09T23:00:00.000Z"

    def test_order_refuses_invalid_values(self):
        order = _normalizer().normalize(_row(*ROW_A))
        with pytest.raises(ValueError):
            Order(**{**order.__dict__, "offered_price": 0})
        with pytest.raises(ValueError):
            Order(**{**order.__dict__, "shipper": ""})
