import pytest

from wifispots.app.use_cases.submit_review import RatingAggregator
from wifispots.core.entities import Place
from wifispots.infrastructure.persistence.sql.admin_repository import SqlAdminRepository
from wifispots.infrastructure.persistence.sql.db import SqlDatabase
from wifispots.infrastructure.persistence.sql.place_repository import SqlPlaceRepository
from wifispots.infrastructure.persistence.sql.review_repository import SqlReviewRepository


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'wifispots-test.db'}"


@pytest.fixture
def db(db_url):
    database = SqlDatabase.from_url(db_url)
    yield database
    database.close()


@pytest.fixture
def places(db):
    return SqlPlaceRepository(db)


@pytest.fixture
def reviews(db):
    return SqlReviewRepository(db)


@pytest.fixture
def admins(db):
    return SqlAdminRepository(db)


@pytest.fixture
def aggregator(places, reviews):
    return RatingAggregator(places, reviews)


@pytest.fixture
def make_place(places):
    def _make(name="Cafe Nord", **kw):
        fields = dict(
            type="Cafe",
            address="1 Harbour St",
            wifi_quality="Good",
            work_hours="09:00-18:00",
            contact="+1 555 0100",
        )
        fields.update(kw)
        return places.add(Place(name=name, **fields))

    return _make
