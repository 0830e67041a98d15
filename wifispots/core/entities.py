from dataclasses import dataclass
from datetime import datetime

ANONYMOUS_AUTHOR = "Anonymous"


@dataclass
class Place:
    name: str
    type: str = ""
    address: str = ""
    wifi_quality: str = ""
    work_hours: str = ""
    description: str = ""
    photo_path: str = ""
    contact: str = ""
    rating: float = 0.0
    id: int | None = None


@dataclass
class Review:
    place_id: int
    stars: int
    author: str = ANONYMOUS_AUTHOR
    comment: str = ""
    id: int | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class Admin:
    username: str
    password_hash: str
