import pytest

from decimal import Decimal

from appdoc.datadef import Application, DocumentConfig


APPLICATION_ID = "5f0c8f3e-2b8a-4c61-9a57-0f2d4b7a1e10"


def make_application(**overrides):
    data = {
        "id": APPLICATION_ID,
        "reference_number": "APP-0001",
        "state": "Activated",
        "person": {"first_name": "Jane", "surname": "Doe"},
        "date": "2024-03-05",
        "is_legal_entity": False,
        "products": [{"name": "Growth", "funds": [{"name": "Equity", "amount": 1000, "fees": 50}]}],
    }
    data.update(overrides)
    return Application.create(data)


@pytest.fixture
def document_config():
    return DocumentConfig(
        support_email="help@example.com",
        signature="Client Services",
        tax_rate=Decimal("0.15"),
    )


@pytest.fixture
def application_factory():
    return make_application
