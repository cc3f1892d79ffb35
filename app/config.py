from decouple import config

DEFAULT_SEED_URL = "https://s3.amazonaws.com/roxiler.com/product_transaction.json"


class DashboardConfig:
    def __init__(self) -> None:
        self.db_url = config(
            "db_url", default="sqlite+aiosqlite:///./data/transactions.db"
        )
        self.host = config("host", default="127.0.0.1")
        self.port = config("port", default=3000, cast=int)

        self.seed_url = config("seed_url", default=DEFAULT_SEED_URL)
        self.seed_timeout = config("seed_timeout", default=30, cast=int)

        self.cors_origin = config("cors_origin", default="http://localhost:3001")

        # The seed dataset is from 2022, months without a year refer to it
        self.reference_year = config("reference_year", default=2022, cast=int)


dashboard_config = DashboardConfig()
