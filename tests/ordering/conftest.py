import pytest
from ordering.geocoding import set_geocoder
from ordering.geocoding.fake_adapter import FakeGeocoder
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def ordering_bed():
    from ordering.domain import ordering

    bed = DomainFixture(ordering)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(ordering_bed):
    with ordering_bed.domain_context():
        yield


@pytest.fixture()
def geocoder():
    """A fake geocoder installed as the active geocoder for the test."""
    fake = FakeGeocoder()
    set_geocoder(fake)
    return fake
