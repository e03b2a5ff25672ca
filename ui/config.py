import os

BASE_URL = os.getenv("UPI_API_URL", "http://localhost:5000/upi/v1")
REQUEST_TIMEOUT = float(os.getenv("UPI_API_TIMEOUT", "10"))
