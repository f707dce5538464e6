import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

TIMEZONE = os.getenv("TIMEZONE", "America/Sao_Paulo")
PAIRING_POLICY = os.getenv("PAIRING_POLICY", "first_pair")

DEFAULT_BREAK_MINUTES = int(os.getenv("DEFAULT_BREAK_MINUTES", "60"))
DAILY_WORK_HOURS = int(os.getenv("DAILY_WORK_HOURS", "8"))
WEEKLY_WORK_HOURS = int(os.getenv("WEEKLY_WORK_HOURS", "40"))
WARNING_RATIO = float(os.getenv("WARNING_RATIO", "0.8"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEBUG = False
