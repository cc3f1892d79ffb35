month_desc = (
    "Month of the year (1-12). Values outside that range are not rejected, "
    "they match no transaction."
)

year_desc = (
    "Year the month belongs to. Defaults to the configured reference year "
    "of the dataset."
)

search_desc = """Free text search. Matches `title` or `description` case-insensitively.
If the term is a number, transactions with exactly that `price` match as well.
"""

list_transactions_desc = """Returns one page of transactions, filtered by month and a search term.

Transactions are returned in the order they were seeded.

```json
{
  "transactions": [...],
  "total": 42,
  "page": 1,
  "totalPages": 5
}
```
"""

bar_chart_desc = """Counts the transactions of the month per price range.

Always returns ten ranges in fixed order: `0-100`, `101-200`, ... `801-900`, `901-above`.
A price belongs to the range whose lower bound is the largest one not above the price,
so `100.50` is counted in `0-100` and `200` in `101-200`.
"""

combined_data_desc = """Statistics, price ranges and categories of the month in one response.

Fails as a whole if one of the three parts can't be computed.
"""
