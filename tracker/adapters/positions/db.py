import os
from contextlib import asynccontextmanager
from typing import AsyncIterator

from dotenv import load_dotenv
import psycopg

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL")


@asynccontextmanager
async def get_conn() -> AsyncIterator[psycopg.AsyncConnection]:
    if not DATABASE_URL:
        raise psycopg.OperationalError("DATABASE_URL is not set")
    async with await psycopg.AsyncConnection.connect(DATABASE_URL) as conn:
        yield conn
