import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Working-time policy
WORK_START = os.getenv("WORK_START", "09:00")
WORK_END = os.getenv("WORK_END", "17:30")
SHORTFALL_BASELINE_MINUTES = int(os.getenv("SHORTFALL_BASELINE_MINUTES", "480"))
REFERENCE_HOURS_PER_DAY = float(os.getenv("REFERENCE_HOURS_PER_DAY", "8"))

# Salary a newly materialized month starts with
DEFAULT_BASE_SALARY = float(os.getenv("DEFAULT_BASE_SALARY", "8500"))
