"""Test doubles for the museum catalog API."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

import httpx

CATALOG_URL = "https://catalog.test/public/collection/v1"

ObjectBody = Union[Dict[str, Any], str, Exception]


def artwork_payload(object_id: int, title: Optional[str] = None, **extra: Any) -> Dict[str, Any]:
    """A detail record shaped like the catalog's `/objects/{id}` response."""
    payload: Dict[str, Any] = {
        "objectID": object_id,
        "title": title,
        "artistDisplayName": None,
        "objectDate": None,
        "primaryImageSmall": f"https://images.test/{object_id}-small.jpg",
        "primaryImage": f"https://images.test/{object_id}.jpg",
        "medium": None,
        "department": "European Paintings",
        "isPublicDomain": True,
    }
    payload.update(extra)
    return payload


class FakeCatalog:
    """Routes catalog requests to canned responses and records what was asked."""

    def __init__(
        self,
        search_body: Union[Dict[str, Any], str, None] = None,
        objects: Optional[Dict[int, ObjectBody]] = None,
        *,
        search_status: int = 200,
        search_error: Optional[Exception] = None,
    ) -> None:
        self.search_body = search_body if search_body is not None else {"total": 0, "objectIDs": None}
        self.objects = objects or {}
        self.search_status = search_status
        self.search_error = search_error
        self.requests: List[httpx.Request] = []

    @property
    def detail_requests(self) -> List[int]:
        return [int(r.url.path.rsplit("/", 1)[-1]) for r in self.requests if "/objects/" in r.url.path]

    @property
    def search_requests(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path.endswith("/search")]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path.endswith("/search"):
            if self.search_error is not None:
                raise self.search_error
            return _respond(self.search_status, self.search_body)

        object_id = int(request.url.path.rsplit("/", 1)[-1])
        body = self.objects.get(object_id)
        if body is None:
            return httpx.Response(404, json={"message": "ObjectID not found"})
        if isinstance(body, Exception):
            raise body
        return _respond(200, body)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


def _respond(status_code: int, body: Union[Dict[str, Any], str]) -> httpx.Response:
    if isinstance(body, str):
        return httpx.Response(status_code, text=body)
    return httpx.Response(status_code, json=body)
