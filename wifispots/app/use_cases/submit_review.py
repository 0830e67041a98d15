from __future__ import annotations

import logging

from wifispots.core.entities import Review
from wifispots.core.errors import NotFoundError
from wifispots.core.ports import PlaceRepository, ReviewRepository

logger = logging.getLogger(__name__)


class RatingAggregator:
    """Keeps ``places.rating`` equal to the mean of the place's review stars."""

    def __init__(self, places: PlaceRepository, reviews: ReviewRepository):
        self.places = places
        self.reviews = reviews

    def recompute(self, place_id: int) -> float:
        avg = self.reviews.average_stars(place_id)
        rating = 0.0 if avg is None else round(avg, 2)
        self.places.update_rating(place_id, rating)
        logger.info(f"Place #{place_id} rating -> {rating}")
        return rating

    def recompute_all(self) -> int:
        ids = self.places.list_ids()
        for place_id in ids:
            self.recompute(place_id)
        return len(ids)


class SubmitReviewUseCase:
    def __init__(self, places: PlaceRepository, reviews: ReviewRepository, aggregator: RatingAggregator):
        self.places = places
        self.reviews = reviews
        self.aggregator = aggregator

    def run(self, place_id: int, stars: int, author: str = "", comment: str = "") -> Review:
        if self.places.get_by_id(place_id) is None:
            raise NotFoundError(f"Place #{place_id} not found.")
        review = self.reviews.add(
            Review(place_id=place_id, stars=stars, author=author, comment=comment)
        )
        # two separate commands: a failed write-back leaves the review in place
        self.aggregator.recompute(place_id)
        return review
