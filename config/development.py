import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Reporting timezone: week and day boundaries are local to it
TIMEZONE = os.getenv("TIMEZONE", "America/Sao_Paulo")

# first_pair | sequential
PAIRING_POLICY = os.getenv("PAIRING_POLICY", "first_pair")

DEFAULT_BREAK_MINUTES = int(os.getenv("DEFAULT_BREAK_MINUTES", "60"))
DAILY_WORK_HOURS = int(os.getenv("DAILY_WORK_HOURS", "8"))
WEEKLY_WORK_HOURS = int(os.getenv("WEEKLY_WORK_HOURS", "40"))
WARNING_RATIO = float(os.getenv("WARNING_RATIO", "0.8"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

DEBUG = True
