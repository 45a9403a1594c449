"""Base S3 gateway interface."""

from __future__ import annotations

from typing import Protocol

from ...models import Tag, WebsiteConfiguration


class BucketGateway(Protocol):
    """Protocol defining the bucket-level provider operations.

    Implementations raise ``BucketNotFoundError`` when the provider reports a
    missing bucket and ``ProviderError`` for any other failure.
    """

    def create_bucket(self, name: str, acl: str, location_constraint: str | None = None) -> None:
        """Create a bucket, with a location constraint unless it is None."""
        ...

    def head_bucket(self, name: str) -> None:
        """Check that a bucket exists."""
        ...

    def delete_bucket(self, name: str) -> None:
        """Delete a bucket."""
        ...

    def put_bucket_website(self, name: str, config: WebsiteConfiguration) -> None:
        """Set bucket website configuration."""
        ...

    def delete_bucket_website(self, name: str) -> None:
        """Remove bucket website configuration. Succeeds when none is set."""
        ...

    def get_bucket_tags(self, name: str) -> list[Tag]:
        """Get bucket tag set."""
        ...

    def put_bucket_tags(self, name: str, tags: list[Tag]) -> None:
        """Replace the bucket tag set."""
        ...
