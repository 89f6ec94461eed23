"""
Pydantic models for API responses

Field names are the JSON keys the n8n workflow already reads, so they are
kept exactly as the caller expects them.
"""

from pydantic import BaseModel, Field
from typing import List, Optional

from ...domain.entities import Order, ScrapeResult


class OrderResponse(BaseModel):
    """One open freight order"""
    jobId: str
    shipper: str
    tanggal: str
    jamMuat: str
    jam: str
    asal: str
    tujuan: str
    rute: str
    tipeTruk: str
    jenisKendaraan: str
    hargaPenawaran: int
    harga: int
    tonase: int
    status: str
    keterangan: str
    contact: str
    deadline: str
    jenisBarang: str
    source: str
    timestamp: str

    @classmethod
    def from_order(cls, order: Order) -> "OrderResponse":
        return cls(**order.to_dict())


class ScrapeResponse(BaseModel):
    """Response model for a successful scrape"""
    success: bool = True
    orders: List[OrderResponse] = Field(default_factory=list)
    totalOrders: int
    scrapedAt: str
    source: str

    @classmethod
    def from_result(cls, result: ScrapeResult) -> "ScrapeResponse":
        data = result.to_dict()
        return cls(
            success=True,
            orders=[OrderResponse.from_order(order) for order in result.orders],
            totalOrders=data['totalOrders'],
            scrapedAt=data['scrapedAt'],
            source=data['source'],
        )


class ErrorResponse(BaseModel):
    """Body of every non-2xx response"""
    success: bool = False
    error: str
    message: Optional[str] = None
    orders: Optional[List[OrderResponse]] = None
    scrapedAt: Optional[str] = None

    @classmethod
    def from_failed_result(cls, result: ScrapeResult) -> "ErrorResponse":
        data = result.to_dict()
        return cls(error=data['error'] or "Scrape failed", orders=[], scrapedAt=data['scrapedAt'])


class HealthResponse(BaseModel):
    """Response model for health check"""
    status: str
    timestamp: str
    uptime: float
