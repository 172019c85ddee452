import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Select the config overlay before any test module imports the domain."""
    os.environ["PROTEAN_ENV"] = session.config.option.env
    os.environ.setdefault("EMAIL_BACKEND", "fake")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = Path(item.fspath)

        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path):
            item.add_marker(pytest.mark.application)
        elif "/integration/" in str(test_path):
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session")
def marketplace_bed():
    from protean.integrations.pytest import DomainFixture

    from marketplace.domain import marketplace

    bed = DomainFixture(marketplace)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(marketplace_bed):
    with marketplace_bed.domain_context():
        yield

        from protean import current_domain

        for _, provider in current_domain.providers.items():
            provider._data_reset()

        current_domain.event_store.store._data_reset()


@pytest.fixture(autouse=True)
def outbox():
    """A fresh recording email channel for every test."""
    from marketplace.notifications.channel import reset_email_channel, set_email_channel
    from marketplace.notifications.channel.fake_email import FakeEmailAdapter

    adapter = FakeEmailAdapter()
    set_email_channel(adapter)
    yield adapter
    reset_email_channel()


# ---------------------------------------------------------------------------
# Account helpers shared across contexts
# ---------------------------------------------------------------------------
PASSWORD = "Secret123"


@pytest.fixture()
def register_user():
    """Factory: sign up (and by default verify) an account, returning its id."""
    from protean import current_domain

    from marketplace.identity.user import credentials
    from marketplace.identity.user.profile import UpdateProfile
    from marketplace.identity.user.verification import VerifyEmail

    def _register(email, password=PASSWORD, verified=True, role=None, business_name=None, **profile):
        result = credentials.sign_up(email, password, password)
        if verified:
            current_domain.process(VerifyEmail(token=result["token"]), asynchronous=False)
        if role:
            current_domain.process(
                UpdateProfile(
                    user_id=result["user_id"],
                    first_name=profile.get("first_name", "Ana"),
                    last_name=profile.get("last_name", "Cruz"),
                    contact_number=profile.get("contact_number", "09171234567"),
                    address=profile.get("address", "12 Mabini St"),
                    role=role,
                    business_name=business_name,
                ),
                asynchronous=False,
            )
        return result["user_id"]

    return _register


@pytest.fixture()
def seller_id(register_user):
    return register_user("seller@example.com", role="seller", business_name="Ana's Farm")


@pytest.fixture()
def buyer_id(register_user):
    return register_user("buyer@example.com", role="buyer", first_name="Ben", last_name="Reyes")


@pytest.fixture()
def add_product(seller_id):
    """Factory: list a product for the default seller, returning its id."""
    from protean import current_domain

    from marketplace.catalogue.product.creation import AddProduct

    def _add(name="Tomatoes", quantity=10, unit_price=25.0, category="gulay", seller=None, **extra):
        command = AddProduct(
            seller_id=seller or seller_id,
            name=name,
            quantity=quantity,
            unit_price=unit_price,
            category=category,
            **extra,
        )
        return current_domain.process(command, asynchronous=False)

    return _add


@pytest.fixture()
def auth_headers():
    from marketplace.identity.user.tokens import issue_access_token

    def _headers(user_id):
        return {"Authorization": f"Bearer {issue_access_token(user_id)}"}

    return _headers


@pytest.fixture()
def client():
    """TestClient over the full application, sharing the test domain context."""
    from fastapi.testclient import TestClient

    from marketplace.api.application import create_app

    return TestClient(create_app(), raise_server_exceptions=False)
