import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

WORK_START = os.getenv("WORK_START", "09:00")
WORK_END = os.getenv("WORK_END", "17:30")
SHORTFALL_BASELINE_MINUTES = int(os.getenv("SHORTFALL_BASELINE_MINUTES", "480"))
REFERENCE_HOURS_PER_DAY = float(os.getenv("REFERENCE_HOURS_PER_DAY", "8"))

DEFAULT_BASE_SALARY = float(os.getenv("DEFAULT_BASE_SALARY", "8500"))
