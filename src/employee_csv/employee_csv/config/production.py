import os

from ..core.constants import DEFAULT_CSV_FILE, DEFAULT_SAMPLE_SIZE

CSV_FILE = os.getenv("EMPLOYEE_CSV_FILE", DEFAULT_CSV_FILE)
DATA_DIR = os.getenv("EMPLOYEE_CSV_DATA_DIR") or None
SAMPLE_SIZE = int(os.getenv("EMPLOYEE_CSV_SAMPLE_SIZE", str(DEFAULT_SAMPLE_SIZE)))

DEBUG = False
