import logging
from datetime import datetime

from wifispots.core.entities import ANONYMOUS_AUTHOR, Review
from wifispots.core.errors import ValidationError
from wifispots.core.ports import DataAccessPort, ReviewRepository

logger = logging.getLogger(__name__)

INSERT_SQL = """
INSERT INTO reviews (place_id, author, stars, comment, created_at)
VALUES (:place_id, :author, :stars, :comment, :created_at)
"""

SELECT_BY_PLACE_SQL = """
SELECT id, place_id, author, stars, comment, created_at
FROM reviews
WHERE place_id = :place_id
ORDER BY created_at DESC, id DESC
"""

AVG_STARS_SQL = "SELECT AVG(stars) FROM reviews WHERE place_id = :place_id"

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def _parse_ts(value) -> datetime | None:
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


class SqlReviewRepository(ReviewRepository):
    def __init__(self, db: DataAccessPort):
        self.db = db

    def add(self, review: Review) -> Review:
        if review.stars not in range(1, 6):
            raise ValidationError("Stars must be between 1 and 5.")
        review.author = (review.author or "").strip() or ANONYMOUS_AUTHOR
        review.comment = (review.comment or "").strip()
        created_at = datetime.now().replace(microsecond=0)

        review.id = self.db.execute_insert(
            INSERT_SQL,
            {
                "place_id": review.place_id,
                "author": review.author,
                "stars": int(review.stars),
                "comment": review.comment,
                "created_at": created_at.strftime(TIMESTAMP_FORMAT),
            },
        )
        review.created_at = created_at
        logger.info(f"Added review #{review.id} ({review.stars}*) for place #{review.place_id}")
        return review

    def list_by_place(self, place_id: int) -> list[Review]:
        rows = self.db.execute_query(SELECT_BY_PLACE_SQL, {"place_id": place_id})
        return [
            Review(
                id=int(r["id"]),
                place_id=int(r["place_id"]),
                author=r["author"] or ANONYMOUS_AUTHOR,
                stars=int(r["stars"]),
                comment=r["comment"] or "",
                created_at=_parse_ts(r["created_at"]),
            )
            for r in rows
        ]

    def average_stars(self, place_id: int) -> float | None:
        avg = self.db.execute_scalar(AVG_STARS_SQL, {"place_id": place_id})
        return None if avg is None else float(avg)
