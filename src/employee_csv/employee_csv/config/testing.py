import os

from ..core.constants import DEFAULT_CSV_FILE

CSV_FILE = os.getenv("EMPLOYEE_CSV_FILE", DEFAULT_CSV_FILE)
DATA_DIR = os.getenv("EMPLOYEE_CSV_DATA_DIR") or None
SAMPLE_SIZE = 3

DEBUG = False
TESTING = True
