from __future__ import annotations

from dataclasses import dataclass

from wifispots.core.entities import Place
from wifispots.core.errors import NotFoundError, ValidationError
from wifispots.core.ports import PhotoStore, PlaceRepository
from wifispots.core.work_hours import normalize_work_hours

REQUIRED_FIELDS = ("name", "type", "address", "wifi_quality", "work_hours", "contact")


@dataclass
class PlaceForm:
    name: str = ""
    type: str = ""
    address: str = ""
    wifi_quality: str = ""
    work_hours: str = ""
    contact: str = ""
    description: str = ""
    photo: str | None = None

    def cleaned(self) -> "PlaceForm":
        missing = [f for f in REQUIRED_FIELDS if not (getattr(self, f) or "").strip()]
        if missing:
            raise ValidationError("Fill in all fields: " + ", ".join(missing) + ".")
        return PlaceForm(
            name=self.name.strip(),
            type=self.type.strip(),
            address=self.address.strip(),
            wifi_quality=self.wifi_quality.strip(),
            work_hours=normalize_work_hours(self.work_hours),
            contact=self.contact.strip(),
            description=(self.description or "").strip(),
            photo=self.photo,
        )


class ManagePlacesUseCase:
    def __init__(self, repo: PlaceRepository, photos: PhotoStore):
        self.repo = repo
        self.photos = photos

    def create(self, form: PlaceForm) -> Place:
        f = form.cleaned()
        place = Place(
            name=f.name,
            type=f.type,
            address=f.address,
            wifi_quality=f.wifi_quality,
            work_hours=f.work_hours,
            description=f.description,
            contact=f.contact,
            photo_path=self.photos.store(f.photo),
        )
        return self.repo.add(place)

    def update(self, place_id: int, form: PlaceForm) -> Place:
        place = self.repo.get_by_id(place_id)
        if place is None:
            raise NotFoundError(f"Place #{place_id} not found.")
        f = form.cleaned()
        place.name = f.name
        place.type = f.type
        place.address = f.address
        place.wifi_quality = f.wifi_quality
        place.work_hours = f.work_hours
        place.description = f.description
        place.contact = f.contact
        if f.photo:
            place.photo_path = self.photos.store(f.photo) or place.photo_path
        self.repo.update(place)
        return place

    def delete(self, place_id: int) -> None:
        if not self.repo.delete(place_id):
            raise NotFoundError(f"Place #{place_id} not found.")
