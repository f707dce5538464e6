SECRET_KEY = "test-secret"

TIMEZONE = "America/Sao_Paulo"
PAIRING_POLICY = "first_pair"

DEFAULT_BREAK_MINUTES = 60
DAILY_WORK_HOURS = 8
WEEKLY_WORK_HOURS = 40
WARNING_RATIO = 0.8

LOG_LEVEL = "WARNING"

DEBUG = False
TESTING = True
