import requests
from config import BASE_URL, REQUEST_TIMEOUT

def post(endpoint, payload):
    try:
        r = requests.post(f"{BASE_URL}/{endpoint}", json=payload, timeout=REQUEST_TIMEOUT)
        return r.status_code, r.json()
    except (requests.RequestException, ValueError) as e:
        return 500, {"error": str(e)}
