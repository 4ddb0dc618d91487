SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

WORK_START = "09:00"
WORK_END = "17:30"
SHORTFALL_BASELINE_MINUTES = 480
REFERENCE_HOURS_PER_DAY = 8

DEFAULT_BASE_SALARY = 8500.0
