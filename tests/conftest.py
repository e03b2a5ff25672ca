import pytest

from upi_analyzer import create_app


@pytest.fixture
def app():
    return create_app({"TESTING": True})


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def monthly_log():
    return [
        {"id": "T1", "type": "credit", "amount": 5000, "to": "Salary", "category": "income", "date": "2025-01-01"},
        {"id": "T2", "type": "debit", "amount": 200, "to": "Swiggy", "category": "food", "date": "2025-01-02"},
        {"id": "T3", "type": "debit", "amount": 100, "to": "Swiggy", "category": "food", "date": "2025-01-03"},
    ]
