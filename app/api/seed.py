from datetime import datetime, timezone
from typing import Dict, List

import aiohttp
from loguru import logger

from app.api.db.database import Database
from app.api.db.schemas import Transaction


def parse_date_of_sale(value: str) -> datetime:
    """Parses an ISO-8601 timestamp into a naive UTC datetime.

    The seed document carries offsets like `2021-11-27T20:29:54+05:30`,
    timestamps without an offset are assumed to be UTC already.
    """

    if value.endswith("Z"):
        value = value[:-1] + "+00:00"

    d = datetime.fromisoformat(value)
    if d.tzinfo is None:
        return d

    return d.astimezone(timezone.utc).replace(tzinfo=None)


_TRUE_STRINGS = ("true", "1", "yes")
_FALSE_STRINGS = ("false", "0", "no", "")


def parse_sold(value) -> bool:
    if isinstance(value, str):
        v = value.strip().lower()
        if v in _TRUE_STRINGS:
            return True
        if v in _FALSE_STRINGS:
            return False
        raise ValueError(f"Invalid value for sold: {value!r}")

    return bool(value)


def coerce_record(item: Dict) -> Transaction:
    return Transaction(
        id=int(item["id"]),
        title=item.get("title", ""),
        description=item.get("description", ""),
        price=float(item.get("price", 0)),
        category=item.get("category", ""),
        image=item.get("image"),
        sold=parse_sold(item.get("sold", False)),
        date_of_sale=parse_date_of_sale(item["dateOfSale"]),
    )


async def fetch_seed_data(url: str, timeout: int = 30) -> List[Dict]:
    client_timeout = aiohttp.ClientTimeout(total=timeout)
    async with aiohttp.ClientSession(timeout=client_timeout) as session:
        async with session.get(url) as resp:
            resp.raise_for_status()
            # S3 does not always label the document as application/json
            data = await resp.json(content_type=None)

    if not isinstance(data, list):
        raise ValueError(f"Seed document at {url} is not a JSON array")

    return data


@logger.catch(default=0, message="Error initializing database")
async def seed_database(db: Database, url: str, timeout: int = 30) -> int:
    """Populates an empty store from the seed document at `url`.

    Returns the number of inserted records, 0 when the store already
    contains data or when seeding failed.
    """

    existing = await db.count()
    if existing > 0:
        logger.info(f"Database already contains data: {existing} documents")
        return 0

    logger.info(f"Initializing database from {url}")
    items = await fetch_seed_data(url, timeout)
    rows = await db.insert_many([coerce_record(i) for i in items])
    logger.success(f"Database initialized with {len(rows)} documents")

    return len(rows)
