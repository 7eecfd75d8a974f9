import pytest

from efe.catalog import Catalog
from efe.engine import Evaluator


@pytest.fixture(scope="session")
def shipped_catalog():
    return Catalog.default()


@pytest.fixture
def catalog():
    # Fresh copy per test; add_custom mutates the catalog in place.
    return Catalog.default()


@pytest.fixture
def evaluator(catalog):
    return Evaluator(catalog)
