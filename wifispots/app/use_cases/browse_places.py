from __future__ import annotations

from dataclasses import dataclass

from wifispots.core.entities import Place, Review
from wifispots.core.errors import NotFoundError
from wifispots.core.filters import FilterCriteria
from wifispots.core.ports import PlaceRepository, ReviewRepository
from wifispots.core.query import compose_place_query


class BrowsePlacesUseCase:
    def __init__(self, repo: PlaceRepository):
        self.repo = repo

    def run(self, criteria: FilterCriteria | None = None) -> list[Place]:
        query = compose_place_query(criteria or FilterCriteria())
        return self.repo.find(query)


@dataclass
class PlaceDetails:
    place: Place
    reviews: list[Review]


class PlaceDetailsUseCase:
    def __init__(self, places: PlaceRepository, reviews: ReviewRepository):
        self.places = places
        self.reviews = reviews

    def run(self, place_id: int) -> PlaceDetails:
        place = self.places.get_by_id(place_id)
        if place is None:
            raise NotFoundError(f"Place #{place_id} not found.")
        return PlaceDetails(place=place, reviews=self.reviews.list_by_place(place_id))
