import json
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


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path or "/integrity/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session")
def _storefront_domain(request):
    """Initialize the storefront domain once per session."""
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from storefront.domain import storefront

    storefront.init()
    return storefront


@pytest.fixture(scope="session", autouse=True)
def setup_db(_storefront_domain):
    from storefront.utils.db import drop_db, setup_db

    setup_db(_storefront_domain)

    yield

    drop_db(_storefront_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_storefront_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _storefront_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()

    from storefront.utils.logging import clear_context

    clear_context()


# ---------------------------------------------------------------------------
# Record factories shared across contexts
# ---------------------------------------------------------------------------
@pytest.fixture()
def register_customer():
    """Register an account with a customer profile; returns the customer id."""
    from protean import current_domain

    from storefront.identity.registration import RegisterAccount

    counter = iter(range(1, 1000))

    def _register(email=None, first_name="Jane", last_name="Doe", **overrides):
        command = RegisterAccount(
            email=email or f"shopper{next(counter)}@example.com",
            password_hash="$2b$12$hash",
            first_name=first_name,
            last_name=last_name,
            **overrides,
        )
        return current_domain.process(command, asynchronous=False)

    return _register


@pytest.fixture()
def create_product():
    """Create a product with its stock record; returns the product id."""
    from protean import current_domain

    from storefront.catalogue.products import CreateProduct

    counter = iter(range(1, 1000))

    def _create(sku=None, name="Wireless Mouse", price=29.99, **overrides):
        command = CreateProduct(
            sku=sku or f"SKU-{next(counter):04d}",
            name=name,
            price=price,
            **overrides,
        )
        return current_domain.process(command, asynchronous=False)

    return _create


@pytest.fixture()
def add_address():
    from protean import current_domain

    from storefront.identity.addresses import AddAddress

    def _add(customer_id, street="12 Market St", city="Springfield", country="US", **overrides):
        command = AddAddress(customer_id=customer_id, street=street, city=city, country=country, **overrides)
        return current_domain.process(command, asynchronous=False)

    return _add


@pytest.fixture()
def place_order():
    from protean import current_domain

    from storefront.ordering.creation import PlaceOrder

    def _place(customer_id, items=(), **overrides):
        command = PlaceOrder(customer_id=customer_id, items=json.dumps(list(items)), **overrides)
        return current_domain.process(command, asynchronous=False)

    return _place
