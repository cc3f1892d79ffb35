import os

from loguru import logger


def is_sqlite_url(db_url: str) -> bool:
    return db_url.startswith("sqlite")


def sqlite_file_path(db_url: str) -> str:
    """extracts the file path from a SQLite url, empty for in-memory databases"""

    if "///" not in db_url:
        return ""

    path = db_url.split("///", 1)[1]
    if path == ":memory:":
        return ""

    return path


def ensure_sqlite_db_file(db_url: str) -> None:
    """ensures that the directory of the SQLite database file exists"""

    db_file = sqlite_file_path(db_url)
    if db_file == "":
        return

    logger.debug(f"Ensuring that the SQLite database directory exists: {db_file}")

    if os.path.exists(db_file):
        return

    # SQLite creates the file itself but not the directories above it
    if os.path.dirname(db_file) != "":
        os.makedirs(os.path.dirname(db_file), exist_ok=True)
