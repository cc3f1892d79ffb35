from typing import Dict, List

from app.api.db.database import Database
from app.api.seed import coerce_record

# Same shape as the records of the seed document
SAMPLE_TRANSACTIONS: List[Dict] = [
    {
        "id": 1,
        "title": "Mens Casual Premium Slim Fit T-Shirts",
        "price": 150,
        "description": "Slim-fitting style, contrast raglan long sleeve",
        "category": "men's clothing",
        "image": "https://fakestoreapi.com/img/71-3HjGNDUL._AC_SY879._SX._UX._SY._UY_.jpg",
        "sold": True,
        "dateOfSale": "2022-03-27T20:29:54+05:30",
    },
    {
        "id": 2,
        "title": "Fjallraven Foldsack No. 1 Backpack",
        "price": 329.85,
        "description": "Your perfect pack for everyday use and walks in the forest.",
        "category": "men's clothing",
        "image": "https://fakestoreapi.com/img/81fPKd-2AYL._AC_SL1500_.jpg",
        "sold": False,
        "dateOfSale": "2022-03-01T00:10:00+00:00",
    },
    {
        "id": 3,
        "title": "Solid Gold Petite Micropave",
        "price": 950,
        "description": "Satisfaction Guaranteed. Return or exchange any order within 30 days.",
        "category": "jewelery",
        "image": "https://fakestoreapi.com/img/61sbMiUnoGL._AC_UL640_QL65_ML3_.jpg",
        "sold": True,
        "dateOfSale": "2022-03-31T23:59:00Z",
    },
    {
        "id": 4,
        "title": "WD 2TB Elements Portable External Hard Drive",
        "price": 100.5,
        "description": "USB 3.0 and USB 2.0 compatibility, fast data transfers",
        "category": "electronics",
        "image": "https://fakestoreapi.com/img/61IBBVJvSDL._AC_SY879_.jpg",
        "sold": False,
        "dateOfSale": "2022-03-15T10:00:00+00:00",
    },
    {
        "id": 5,
        "title": "Samsung 49-Inch CHG90 Gaming Monitor",
        "price": 999.99,
        "description": "49 inch super ultrawide 32:9 curved gaming monitor",
        "category": "electronics",
        "image": "https://fakestoreapi.com/img/81Zt42ioCgL._AC_SX679_.jpg",
        "sold": True,
        "dateOfSale": "2022-06-10T12:00:00+00:00",
    },
    {
        "id": 6,
        "title": "Rain Jacket Women Windbreaker",
        "price": 39.99,
        "description": "Lightweight, 100% polyester, perfect for trip",
        "category": "women's clothing",
        "image": "https://fakestoreapi.com/img/71HblAHs5xL._AC_UY879_-2.jpg",
        "sold": False,
        "dateOfSale": "2022-06-20T08:30:00+00:00",
    },
    {
        "id": 7,
        "title": "Opna Women's Short Sleeve Moisture",
        "price": 200,
        "description": "Lightweight fabric with great stretch for comfort",
        "category": "women's clothing",
        "image": "https://fakestoreapi.com/img/51eg55uWmdL._AC_UX679_.jpg",
        "sold": True,
        "dateOfSale": "2021-03-05T09:00:00+00:00",
    },
    {
        "id": 8,
        "title": "DANVOUY Womens T Shirt Casual Cotton",
        "price": 12.99,
        "description": "95% cotton, 5% spandex",
        "category": "women's clothing",
        "image": "https://fakestoreapi.com/img/61pHAEJ4NML._AC_UX679_.jpg",
        "sold": False,
        "dateOfSale": "2022-04-01T00:00:00+00:00",
    },
]

MARCH_2022_IDS = [1, 2, 3, 4]


def db_url(path) -> str:
    return f"sqlite+aiosqlite:///{path}"


async def create_database(path, records: List[Dict] = SAMPLE_TRANSACTIONS) -> Database:
    db = Database(db_url(path))
    await db.initialize()
    if records:
        await db.insert_many([coerce_record(r) for r in records])

    return db
