import os

from dotenv import load_dotenv

load_dotenv()

# Bind address for the uvicorn launcher; DATABASE_URL is read by the db adapter.
API_HOST = os.getenv("API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("API_PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
