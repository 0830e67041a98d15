import logging

from wifispots.core.entities import Place
from wifispots.core.ports import DataAccessPort, PlaceRepository
from wifispots.core.query import PlaceQuery

logger = logging.getLogger(__name__)

INSERT_SQL = """
INSERT INTO places (name, type, address, wifi_quality, work_hours, description, photo_path, contact, rating)
VALUES (:name, :type, :address, :wifi_quality, :work_hours, :description, :photo_path, :contact, :rating)
"""

UPDATE_SQL = """
UPDATE places SET
    name = :name,
    type = :type,
    address = :address,
    wifi_quality = :wifi_quality,
    work_hours = :work_hours,
    description = :description,
    photo_path = :photo_path,
    contact = :contact
WHERE id = :id
"""

SELECT_ONE_SQL = "SELECT * FROM places WHERE id = :id LIMIT 1"

SELECT_IDS_SQL = "SELECT id FROM places ORDER BY id"

DELETE_SQL = "DELETE FROM places WHERE id = :id"

UPDATE_RATING_SQL = "UPDATE places SET rating = :rating WHERE id = :id"


class SqlPlaceRepository(PlaceRepository):
    def __init__(self, db: DataAccessPort):
        self.db = db

    @staticmethod
    def _row_to_place(row: dict) -> Place:
        def s(key: str) -> str:
            return "" if row.get(key) is None else str(row[key])

        return Place(
            id=int(row["id"]),
            name=s("name"),
            type=s("type"),
            address=s("address"),
            wifi_quality=s("wifi_quality"),
            work_hours=s("work_hours"),
            description=s("description"),
            photo_path=s("photo_path"),
            contact=s("contact"),
            rating=0.0 if row.get("rating") is None else float(row["rating"]),
        )

    @staticmethod
    def _payload(place: Place) -> dict:
        return {
            "name": place.name,
            "type": place.type,
            "address": place.address,
            "wifi_quality": place.wifi_quality,
            "work_hours": place.work_hours,
            "description": place.description,
            "photo_path": place.photo_path,
            "contact": place.contact,
        }

    def find(self, query: PlaceQuery) -> list[Place]:
        return [self._row_to_place(r) for r in self.db.execute_query(query.sql, query.params)]

    def get_by_id(self, place_id: int) -> Place | None:
        rows = self.db.execute_query(SELECT_ONE_SQL, {"id": place_id})
        return self._row_to_place(rows[0]) if rows else None

    def add(self, place: Place) -> Place:
        payload = self._payload(place)
        payload["rating"] = float(place.rating or 0.0)
        place.id = self.db.execute_insert(INSERT_SQL, payload)
        logger.info(f"Added place #{place.id} {place.name!r}")
        return place

    def update(self, place: Place) -> bool:
        payload = self._payload(place)
        payload["id"] = place.id
        updated = self.db.execute_command(UPDATE_SQL, payload) > 0
        if updated:
            logger.info(f"Updated place #{place.id}")
        return updated

    def delete(self, place_id: int) -> bool:
        deleted = self.db.execute_command(DELETE_SQL, {"id": place_id}) > 0
        if deleted:
            logger.info(f"Deleted place #{place_id}")
        return deleted

    def update_rating(self, place_id: int, rating: float) -> bool:
        return self.db.execute_command(UPDATE_RATING_SQL, {"id": place_id, "rating": rating}) > 0

    def list_ids(self) -> list[int]:
        return [int(r["id"]) for r in self.db.execute_query(SELECT_IDS_SQL)]
