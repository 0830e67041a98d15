import pytest

from wifispots.app.use_cases.submit_review import RatingAggregator, SubmitReviewUseCase
from wifispots.core.errors import NotFoundError, StorageError


@pytest.fixture
def submit(places, reviews, aggregator):
    return SubmitReviewUseCase(places, reviews, aggregator)


def test_place_without_reviews_has_zero_rating(places, make_place, aggregator):
    place = make_place()
    assert places.get_by_id(place.id).rating == 0.0
    assert aggregator.recompute(place.id) == 0.0
    assert places.get_by_id(place.id).rating == 0.0


def test_rating_is_the_mean_after_each_insert(places, make_place, submit):
    place = make_place()
    for stars in (5, 3, 4):
        submit.run(place.id, stars)
    assert places.get_by_id(place.id).rating == 4.0

    submit.run(place.id, 2)
    assert places.get_by_id(place.id).rating == 3.5


def test_rating_is_rounded_to_two_decimals(places, make_place, submit):
    place = make_place()
    for stars in (5, 4, 4):
        submit.run(place.id, stars)
    assert places.get_by_id(place.id).rating == 4.33


def test_ratings_are_kept_per_place(places, make_place, submit):
    a, b = make_place("A"), make_place("B")
    submit.run(a.id, 5)
    submit.run(b.id, 1)
    assert places.get_by_id(a.id).rating == 5.0
    assert places.get_by_id(b.id).rating == 1.0


def test_review_for_unknown_place_is_rejected(submit):
    with pytest.raises(NotFoundError):
        submit.run(999, 4)


class _BrokenRatingWrites:
    def __init__(self, inner):
        self.inner = inner

    def __getattr__(self, name):
        return getattr(self.inner, name)

    def update_rating(self, place_id, rating):
        raise StorageError("Storage failure: OperationalError")


def test_failed_write_back_propagates_and_keeps_the_review(places, reviews, make_place):
    place = make_place()
    broken = _BrokenRatingWrites(places)
    submit = SubmitReviewUseCase(places, reviews, RatingAggregator(broken, reviews))

    with pytest.raises(StorageError):
        submit.run(place.id, 5)

    assert [r.stars for r in reviews.list_by_place(place.id)] == [5]
    assert places.get_by_id(place.id).rating == 0.0


def test_recompute_all_repairs_stale_ratings(places, reviews, make_place, aggregator, submit):
    place = make_place()
    submit.run(place.id, 4)
    places.update_rating(place.id, 0.0)

    assert aggregator.recompute_all() == 1
    assert places.get_by_id(place.id).rating == 4.0
