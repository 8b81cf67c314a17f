from dotenv import load_dotenv
import os

# Load environment
load_dotenv()


def get_database_url() -> str:
    database_url = os.getenv("DATABASE_URL")
    if not database_url:
        raise ValueError("DATABASE_URL is not set!")
    return database_url


def get_sql_echo() -> bool:
    return os.getenv("SQL_ECHO", "false").lower() in ("1", "true", "yes")


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()
