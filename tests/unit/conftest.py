"""Shared fixtures for unit tests."""

from __future__ import annotations

from typing import Any

import pytest

from s3_bucket_controller.models import Tag, WebsiteConfiguration
from s3_bucket_controller.utils.errors import BucketNotFoundError


class FakeGateway:
    """In-memory bucket gateway that records every call."""

    def __init__(self) -> None:
        self.buckets: dict[str, dict[str, Any]] = {}
        self.calls: list[tuple[Any, ...]] = []
        self.failures: dict[str, Exception] = {}

    def _record(self, operation: str, *args: Any) -> None:
        self.calls.append((operation, *args))
        if operation in self.failures:
            raise self.failures[operation]

    def _bucket(self, operation: str, name: str) -> dict[str, Any]:
        if name not in self.buckets:
            raise BucketNotFoundError(name, operation, "Not Found", code="404", status_code=404)
        return self.buckets[name]

    def calls_to(self, operation: str) -> list[tuple[Any, ...]]:
        return [call for call in self.calls if call[0] == operation]

    def create_bucket(self, name: str, acl: str, location_constraint: str | None = None) -> None:
        self._record("create_bucket", name, acl, location_constraint)
        self.buckets[name] = {"acl": acl, "location": location_constraint, "website": None, "tags": []}

    def head_bucket(self, name: str) -> None:
        self._record("head_bucket", name)
        self._bucket("head_bucket", name)

    def delete_bucket(self, name: str) -> None:
        self._record("delete_bucket", name)
        self._bucket("delete_bucket", name)
        del self.buckets[name]

    def put_bucket_website(self, name: str, config: WebsiteConfiguration) -> None:
        self._record("put_bucket_website", name, config)
        self._bucket("put_bucket_website", name)["website"] = config

    def delete_bucket_website(self, name: str) -> None:
        self._record("delete_bucket_website", name)
        self._bucket("delete_bucket_website", name)["website"] = None

    def get_bucket_tags(self, name: str) -> list[Tag]:
        self._record("get_bucket_tags", name)
        return list(self._bucket("get_bucket_tags", name)["tags"])

    def put_bucket_tags(self, name: str, tags: list[Tag]) -> None:
        self._record("put_bucket_tags", name, list(tags))
        self._bucket("put_bucket_tags", name)["tags"] = list(tags)


@pytest.fixture
def gateway() -> FakeGateway:
    """Create an empty in-memory gateway."""
    return FakeGateway()
