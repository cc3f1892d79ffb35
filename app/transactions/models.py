from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class TransactionOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., description="Identifier of the record in the seed source")
    title: str = Field(..., description="Product title")
    description: str = Field("", description="Product description")
    price: float = Field(..., description="Sale price")
    category: str = Field(..., description="Product category")
    image: Optional[str] = Field(None, description="URL of the product image")
    sold: bool = Field(..., description="Whether the item was sold")
    date_of_sale: datetime = Field(
        ..., alias="dateOfSale", description="Date of sale (UTC)"
    )

    @classmethod
    def from_row(cls, r) -> "TransactionOut":
        return cls(
            id=r.id,
            title=r.title,
            description=r.description or "",
            price=r.price,
            category=r.category,
            image=r.image,
            sold=r.sold,
            date_of_sale=r.date_of_sale,
        )


class TransactionPage(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    transactions: List[TransactionOut] = Field(
        ..., description="The transactions of the requested page"
    )
    total: int = Field(..., description="Number of matching transactions")
    page: int = Field(..., description="The requested page, starting at 1")
    total_pages: int = Field(
        ..., alias="totalPages", description="Number of pages for the filter"
    )


class Statistics(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_sale_amount: float = Field(
        0, alias="totalSaleAmount", description="Sum of all prices in the month"
    )
    total_sold_items: int = Field(
        0, alias="totalSoldItems", description="Number of sold items"
    )
    total_not_sold_items: int = Field(
        0, alias="totalNotSoldItems", description="Number of items not sold"
    )


class PriceRangeCount(BaseModel):
    range: str = Field(..., description="Bucket label, `min-max` or `min-above`")
    count: int = Field(..., description="Number of transactions in the bucket")


class CategoryCount(BaseModel):
    category: Optional[str]
    count: int


class CombinedData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    statistics: Statistics
    bar_chart: List[PriceRangeCount] = Field(..., alias="barChart")
    pie_chart: List[CategoryCount] = Field(..., alias="pieChart")
