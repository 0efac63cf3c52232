"""Shared fixtures for Location Query tests.

``FakeLocationCollection`` stands in for a MongoDB collection: it evaluates
``$geoWithin``/``$geometry`` filters with shapely and records cursor closes,
so tests can check both results and resource release without a server.
"""

from typing import Any, Dict, List, Optional

import pytest
from shapely.geometry import shape


UNIT_SQUARE = [[0, 0], [0, 1], [1, 1], [1, 0], [0, 0]]
DISJOINT_SQUARE = [[10, 10], [10, 11], [11, 11], [11, 10], [10, 10]]


def make_document(record_id: str = "loc-1", ring: Optional[List[List[float]]] = None) -> Dict[str, Any]:
    return {
        "_id": record_id,
        "province": "Chiang Mai",
        "district": "Mueang Chiang Mai",
        "sub_district": "Si Phum",
        "village": "Ban Si Phum",
        "border": {"type": "Polygon", "coordinates": [ring or UNIT_SQUARE]},
    }


class FakeCursor:
    """Iterable cursor that counts close() calls."""
    
    def __init__(self, documents: List[Dict[str, Any]], error: Optional[Exception] = None):
        self._documents = documents
        self._error = error
        self.close_count = 0
    
    def __iter__(self):
        for document in self._documents:
            yield document
        if self._error is not None:
            raise self._error
    
    def close(self) -> None:
        self.close_count += 1
    
    def __enter__(self):
        return self
    
    def __exit__(self, exc_type, exc_value, traceback):
        self.close()


class FakeLocationCollection:
    """Minimal collection supporting ``$geoWithin`` and ``$near``/``$nearSphere``.
    
    Near queries measure planar shapely distance in coordinate units and
    return matches nearest first.
    """
    
    def __init__(self, documents: List[Dict[str, Any]]):
        self.documents = documents
        self.cursors: List[FakeCursor] = []
        self.filters: List[Dict[str, Any]] = []
        self.find_error: Optional[Exception] = None
        self.iteration_error: Optional[Exception] = None
    
    def find(self, query_filter: Dict[str, Any]) -> FakeCursor:
        self.filters.append(query_filter)
        if self.find_error is not None:
            raise self.find_error
        
        predicate = query_filter["border"]
        if "$geoWithin" in predicate:
            area = shape(predicate["$geoWithin"]["$geometry"])
            matches = [d for d in self.documents if shape(d["border"]).within(area)]
        else:
            near = predicate.get("$near") or predicate["$nearSphere"]
            origin = shape(near["$geometry"])
            distances = [(shape(d["border"]).distance(origin), d) for d in self.documents]
            distances.sort(key=lambda pair: pair[0])
            matches = [
                d for distance, d in distances
                if near.get("$minDistance", 0) <= distance <= near.get("$maxDistance", float("inf"))
            ]
        
        cursor = FakeCursor(matches, self.iteration_error)
        self.cursors.append(cursor)
        return cursor


class FakeClient:
    """Client exposing ``client[database][collection]`` access."""
    
    def __init__(self, collection: FakeLocationCollection):
        self.collection = collection
        self.accessed: List[tuple] = []
    
    def __getitem__(self, database: str):
        client = self
        
        class _Database:
            def __getitem__(self, name: str):
                client.accessed.append((database, name))
                return client.collection
        
        return _Database()


@pytest.fixture
def location_document():
    return make_document()


@pytest.fixture
def fake_collection():
    return FakeLocationCollection([make_document()])


@pytest.fixture
def fake_client(fake_collection):
    return FakeClient(fake_collection)


@pytest.fixture
def unit_square():
    return [list(p) for p in UNIT_SQUARE]


@pytest.fixture
def disjoint_square():
    return [list(p) for p in DISJOINT_SQUARE]


@pytest.fixture
def document_factory():
    return make_document


@pytest.fixture
def client_factory():
    """Build a fake client over the given documents."""
    def _build(documents):
        return FakeClient(FakeLocationCollection(documents))
    return _build
