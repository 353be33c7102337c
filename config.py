"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()


# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# ── Roster source ─────────────────────────────────────────
# Empty means the built-in roster in db/member_db.py is used.
ROSTER_CSV_PATH: str = os.getenv("ROSTER_CSV_PATH", "")

# ── Reports ───────────────────────────────────────────────
CURRENCY_SYMBOL: str = os.getenv("CURRENCY_SYMBOL", "gd")
SALARY_ALERT_THRESHOLD: float = float(os.getenv("SALARY_ALERT_THRESHOLD", "100000"))
