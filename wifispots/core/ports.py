from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping, Protocol

from .entities import Place, Review
from .query import PlaceQuery


class DataAccessPort(Protocol):
    def execute_query(self, sql: str, params: Mapping[str, Any] | None = None) -> list[dict]: ...

    def execute_scalar(self, sql: str, params: Mapping[str, Any] | None = None) -> Any: ...

    def execute_command(self, sql: str, params: Mapping[str, Any] | None = None) -> int: ...

    def execute_insert(self, sql: str, params: Mapping[str, Any] | None = None) -> int: ...


class PlaceRepository(ABC):
    @abstractmethod
    def find(self, query: PlaceQuery) -> list[Place]: ...
    @abstractmethod
    def get_by_id(self, place_id: int) -> Place | None: ...
    @abstractmethod
    def add(self, place: Place) -> Place: ...
    @abstractmethod
    def update(self, place: Place) -> bool: ...
    @abstractmethod
    def delete(self, place_id: int) -> bool: ...
    @abstractmethod
    def update_rating(self, place_id: int, rating: float) -> bool: ...
    @abstractmethod
    def list_ids(self) -> list[int]: ...


class ReviewRepository(ABC):
    @abstractmethod
    def add(self, review: Review) -> Review: ...
    @abstractmethod
    def list_by_place(self, place_id: int) -> list[Review]: ...
    @abstractmethod
    def average_stars(self, place_id: int) -> float | None: ...


class AdminRepository(ABC):
    @abstractmethod
    def exists(self, username: str) -> bool: ...
    @abstractmethod
    def add(self, username: str, password_hash: str) -> None: ...
    @abstractmethod
    def get_password_hash(self, username: str) -> str | None: ...


class PhotoStore(Protocol):
    def store(self, source_path: str | None) -> str: ...
