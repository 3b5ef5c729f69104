"""
Configuration - environment-driven settings for ingestion, storage and logging
"""
import os

# Financial Modeling Prep (stable API)
FMP_API_URL = os.getenv("FMP_API_URL", "https://financialmodelingprep.com/stable").rstrip("/")
FMP_API_KEY = os.getenv("FMP_API_KEY", "")

# Years of daily history fetched per ticker (~1250 trading days for 5 years)
HISTORY_YEARS = int(os.getenv("HISTORY_YEARS", "5"))

# Seconds before an HTTP request to the data provider is abandoned
HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "30"))

# Price history cache
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///.cache/goldenzone.db")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
