from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request

import app.transactions.docs as docs
from app.api.db.database import Database
from app.transactions.models import (
    CategoryCount,
    CombinedData,
    PriceRangeCount,
    Statistics,
    TransactionPage,
)
from app.transactions.service import (
    DEFAULT_PER_PAGE,
    get_bar_chart,
    get_combined_data,
    get_pie_chart,
    get_statistics,
    list_transactions,
)

_PREFIX = "api"

router = APIRouter(prefix=f"/{_PREFIX}", tags=["Transactions"])


def get_database(request: Request) -> Database:
    return request.app.state.db


# Query parameters are taken as strings on purpose, malformed values
# produce empty results instead of validation errors.
def _month_query(required: bool = True):
    return Query(
        None,
        description=docs.month_desc
        + ("" if required else " Omit to list all months."),
    )


def _year_query():
    return Query(None, description=docs.year_desc)


@router.get(
    "/transactions",
    name=f"{_PREFIX}.transactions",
    summary="List transactions",
    description=docs.list_transactions_desc,
    response_model=TransactionPage,
)
async def list_transactions_path(
    month: Optional[str] = _month_query(required=False),
    search: Optional[str] = Query(None, description=docs.search_desc),
    page: Optional[str] = Query("1", description="Page to return, starting at 1"),
    per_page: Optional[str] = Query(
        str(DEFAULT_PER_PAGE), alias="perPage", description="Transactions per page"
    ),
    year: Optional[str] = _year_query(),
    db: Database = Depends(get_database),
):
    return await list_transactions(db, month, search, page, per_page, year)


@router.get(
    "/statistics",
    name=f"{_PREFIX}.statistics",
    summary="Sale statistics of a month",
    description="Total sale amount, sold and not sold items of the month.",
    response_model=Statistics,
)
async def statistics_path(
    month: Optional[str] = _month_query(),
    year: Optional[str] = _year_query(),
    db: Database = Depends(get_database),
):
    return await get_statistics(db, month, year)


@router.get(
    "/bar-chart",
    name=f"{_PREFIX}.bar-chart",
    summary="Price ranges of a month",
    description=docs.bar_chart_desc,
    response_model=List[PriceRangeCount],
)
async def bar_chart_path(
    month: Optional[str] = _month_query(),
    year: Optional[str] = _year_query(),
    db: Database = Depends(get_database),
):
    return await get_bar_chart(db, month, year)


@router.get(
    "/pie-chart",
    name=f"{_PREFIX}.pie-chart",
    summary="Categories of a month",
    description="Number of transactions per category in the month.",
    response_model=List[CategoryCount],
)
async def pie_chart_path(
    month: Optional[str] = _month_query(),
    year: Optional[str] = _year_query(),
    db: Database = Depends(get_database),
):
    return await get_pie_chart(db, month, year)


@router.get(
    "/combined-data",
    name=f"{_PREFIX}.combined-data",
    summary="Statistics, price ranges and categories of a month",
    description=docs.combined_data_desc,
    response_model=CombinedData,
)
async def combined_data_path(
    month: Optional[str] = _month_query(),
    year: Optional[str] = _year_query(),
    db: Database = Depends(get_database),
):
    return await get_combined_data(db, month, year)
