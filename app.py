"""
Entry point for the UPI transaction analyzer Flask application.

Run with:
    python app.py

Or with a production WSGI server:
    gunicorn -w 4 app:application
"""

import os

from upi_analyzer import create_app

application = create_app()

if __name__ == "__main__":
    application.run(
        host=os.getenv("UPI_HOST", "0.0.0.0"),
        port=int(os.getenv("UPI_PORT", "5000")),
        debug=False,
    )
