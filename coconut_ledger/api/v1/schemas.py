"""Pydantic schemas for API request/response validation"""

import datetime
from pydantic import AliasChoices, BaseModel, Field
from typing import List, Optional

from coconut_ledger.domain.models import FilterMode, SortDirection


class TransactionCreate(BaseModel):
    """Request body for POST /v1/transactions (legacy Thai field names accepted)"""

    date: Optional[datetime.date] = Field(None, validation_alias=AliasChoices("date", "วันที่"))
    purchase_price: float = Field(
        ..., ge=0, allow_inf_nan=False, validation_alias=AliasChoices("purchasePrice", "purchase_price", "ราคาซื้อมะพร้าว"),
        description="Unit cost",
    )
    sold_quantity: int = Field(
        ..., ge=0, validation_alias=AliasChoices("soldQuantity", "sold_quantity", "จำนวนขายมะพร้าว"),
        description="Units sold that day",
    )
    sell_price: float = Field(
        ..., ge=0, allow_inf_nan=False, validation_alias=AliasChoices("sellPrice", "sell_price", "ราคาขายมะพร้าว"),
        description="Unit sale price",
    )


class TransactionSchema(BaseModel):
    """Stored record as returned by GET/POST /v1/transactions"""

    id: str
    date: datetime.date
    purchase_price: float = Field(..., serialization_alias="purchasePrice")
    sold_quantity: int = Field(..., serialization_alias="soldQuantity")
    sell_price: float = Field(..., serialization_alias="sellPrice")


class RecordRow(BaseModel):
    """Table row with derived metrics"""

    id: str
    date: datetime.date
    purchase_price: float
    sold_quantity: int
    sell_price: float
    total_cost: float
    total_revenue: float
    profit: float


class SummarySchema(BaseModel):
    total_revenue: float
    total_profit: float
    total_qty: int
    total_cost: float


class TableQuery(BaseModel):
    """Effective table state after defaults and page clamping"""

    mode: FilterMode
    date: datetime.date
    sort_key: str
    direction: SortDirection
    page: int
    page_size: int


class TableReport(BaseModel):
    """Response for GET /v1/reports/table"""

    available: bool
    query: TableQuery
    rows: List[RecordRow]
    summary: SummarySchema
    total_pages: int
    total_items: int


class MonthlyBucketSchema(BaseModel):
    year: int
    month: int
    label: str
    total_qty: int
    total_cost: float
    total_revenue: float
    net_profit: float


class PricePointSchema(BaseModel):
    date: datetime.date
    purchase_price: float
    sell_price: float
    profit_per_unit: float


class DashboardReport(BaseModel):
    """Response for GET /v1/reports/dashboard"""

    available: bool
    year: Optional[int] = None
    month: Optional[int] = None
    available_years: List[int]
    summary: SummarySchema
    monthly: List[MonthlyBucketSchema]
    price_trend: List[PricePointSchema]
