import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent

# Paths
TEMPLATE_DIR = BASE_DIR / "templates"

# Application settings
DEBUG = os.getenv("DEBUG", "False").lower() == "true"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
PORT = int(os.getenv("PORT", 5000))

# Secret for Flask app, override in production
SECRET_KEY = os.getenv("SECRET_KEY", "dev-salary-estimator")

# Working time assumptions
BASE_WORK_DAYS_PER_MONTH = 22.5
WORK_HOURS_PER_DAY = 8
MONTHS_PER_YEAR = 12
MAX_OVERTIME_HOURS = 80

# Amount fields saturate here; amounts must stay below it
MAX_AMOUNT = 10 ** 15

# Display (ja-JP, JPY)
CURRENCY_SYMBOL = "￥"
RANGE_SEPARATOR = " 〜 "
