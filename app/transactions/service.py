import asyncio
import math
from datetime import datetime
from typing import List, Optional, Tuple, Union

import sqlalchemy as sa
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from app.api.db.database import Database
from app.api.db.schemas import Transaction
from app.config import dashboard_config
from app.transactions.exceptions import CombinedDataException, QueryFailedException
from app.transactions.models import (
    CategoryCount,
    CombinedData,
    PriceRangeCount,
    Statistics,
    TransactionOut,
    TransactionPage,
)

DEFAULT_PER_PAGE = 10

# (lower, upper) of each histogram bucket, both ends as shown in the label.
# A price is counted in bucket i when lower_i <= price < lower_i+1,
# the last bucket has no upper bound.
PRICE_BUCKETS: List[Tuple[int, Optional[int]]] = [
    (0, 100),
    (101, 200),
    (201, 300),
    (301, 400),
    (401, 500),
    (501, 600),
    (601, 700),
    (701, 800),
    (801, 900),
    (901, None),
]

IntParam = Union[int, str, None]


def parse_int(value: IntParam, default: Optional[int] = None) -> Optional[int]:
    if value is None:
        return default

    if isinstance(value, int):
        return value

    try:
        return int(value.strip())
    except ValueError:
        return default


def month_window(month: IntParam, year: IntParam = None) -> Optional[Tuple[datetime, datetime]]:
    """Returns `[start, end)` of the calendar month or None for an invalid month."""

    m = parse_int(month)
    y = parse_int(year, dashboard_config.reference_year)
    if m is None or not 1 <= m <= 12 or not 1 <= y <= 9998:
        return None

    start = datetime(y, m, 1)
    end = datetime(y + 1, 1, 1) if m == 12 else datetime(y, m + 1, 1)
    return start, end


def month_clause(month: IntParam, year: IntParam = None):
    window = month_window(month, year)
    if window is None:
        # malformed months are not rejected, they simply match nothing
        return sa.false()

    start, end = window
    return sa.and_(Transaction.date_of_sale >= start, Transaction.date_of_sale < end)


def parse_price_term(search: str) -> Optional[float]:
    """Returns the search term as a price if it is a finite number."""

    if "_" in search:
        return None

    try:
        value = float(search)
    except ValueError:
        return None

    if math.isnan(value) or math.isinf(value):
        return None

    return value


def search_clause(search: str):
    alternatives = [
        Transaction.title.icontains(search, autoescape=True),
        Transaction.description.icontains(search, autoescape=True),
    ]

    price = parse_price_term(search)
    if price is not None:
        alternatives.append(Transaction.price == price)

    return sa.or_(*alternatives)


def build_list_filters(
    month: IntParam = None, search: Optional[str] = None, year: IntParam = None
) -> List:
    filters = []

    if month is not None and month != "":
        filters.append(month_clause(month, year))

    if search:
        filters.append(search_clause(search))

    return filters


def bucket_label(lower: int, upper: Optional[int]) -> str:
    return f"{lower}-{'above' if upper is None else upper}"


def price_bucket_expr():
    # highest bucket first, the first matching lower bound wins
    whens = [
        (Transaction.price >= lower, i)
        for i, (lower, _) in reversed(list(enumerate(PRICE_BUCKETS)))
    ]
    return sa.case(*whens, else_=None)


async def list_transactions(
    db: Database,
    month: IntParam = None,
    search: Optional[str] = None,
    page: IntParam = 1,
    per_page: IntParam = DEFAULT_PER_PAGE,
    year: IntParam = None,
) -> TransactionPage:
    page = parse_int(page, 1)
    per_page = parse_int(per_page, DEFAULT_PER_PAGE)
    if page < 1:
        page = 1
    if per_page < 1:
        per_page = DEFAULT_PER_PAGE

    filters = build_list_filters(month, search, year)

    query = (
        sa.select(Transaction)
        .where(*filters)
        .order_by(Transaction.pk)
        .offset((page - 1) * per_page)
        .limit(per_page)
    )
    count_query = sa.select(sa.func.count()).select_from(Transaction).where(*filters)

    try:
        async with db.session() as session:
            rows = (await session.execute(query)).scalars().all()
            total = (await session.execute(count_query)).scalar_one()
    except SQLAlchemyError as e:
        logger.error(f"Unable to list transactions: {e}")
        raise QueryFailedException(str(e))

    return TransactionPage(
        transactions=[TransactionOut.from_row(r) for r in rows],
        total=total,
        page=page,
        total_pages=math.ceil(total / per_page),
    )


async def get_statistics(db: Database, month: IntParam, year: IntParam = None) -> Statistics:
    query = sa.select(
        sa.func.coalesce(sa.func.sum(Transaction.price), 0),
        sa.func.coalesce(
            sa.func.sum(sa.case((Transaction.sold == sa.true(), 1), else_=0)), 0
        ),
        sa.func.coalesce(
            sa.func.sum(sa.case((Transaction.sold == sa.false(), 1), else_=0)), 0
        ),
    ).where(month_clause(month, year))

    try:
        async with db.session() as session:
            total, sold, not_sold = (await session.execute(query)).one()
    except SQLAlchemyError as e:
        logger.error(f"Unable to compute statistics: {e}")
        raise QueryFailedException(str(e))

    return Statistics(
        total_sale_amount=total,
        total_sold_items=sold,
        total_not_sold_items=not_sold,
    )


async def get_bar_chart(
    db: Database, month: IntParam, year: IntParam = None
) -> List[PriceRangeCount]:
    buckets = (
        sa.select(price_bucket_expr().label("bucket"))
        .where(month_clause(month, year))
        .subquery()
    )
    query = (
        sa.select(buckets.c.bucket, sa.func.count())
        .where(buckets.c.bucket.is_not(None))
        .group_by(buckets.c.bucket)
    )

    try:
        async with db.session() as session:
            counts = dict((await session.execute(query)).all())
    except SQLAlchemyError as e:
        logger.error(f"Unable to compute price ranges: {e}")
        raise QueryFailedException(str(e))

    return [
        PriceRangeCount(range=bucket_label(lower, upper), count=counts.get(i, 0))
        for i, (lower, upper) in enumerate(PRICE_BUCKETS)
    ]


async def get_pie_chart(
    db: Database, month: IntParam, year: IntParam = None
) -> List[CategoryCount]:
    query = (
        sa.select(Transaction.category, sa.func.count())
        .where(month_clause(month, year))
        .group_by(Transaction.category)
    )

    try:
        async with db.session() as session:
            res = (await session.execute(query)).all()
    except SQLAlchemyError as e:
        logger.error(f"Unable to compute categories: {e}")
        raise QueryFailedException(str(e))

    return [CategoryCount(category=c, count=n) for c, n in res]


async def get_combined_data(
    db: Database, month: IntParam, year: IntParam = None
) -> CombinedData:
    try:
        statistics, bar_chart, pie_chart = await asyncio.gather(
            get_statistics(db, month, year),
            get_bar_chart(db, month, year),
            get_pie_chart(db, month, year),
        )
    except Exception as e:
        logger.error(f"Combined data error: {e}")
        raise CombinedDataException() from e

    return CombinedData(statistics=statistics, bar_chart=bar_chart, pie_chart=pie_chart)
