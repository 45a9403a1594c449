"""Models for bucket reconciliation."""

from __future__ import annotations

from dataclasses import dataclass, field

from .constants import DEFAULT_ACL


@dataclass(frozen=True)
class Tag:
    """A single key/value pair in the provider's tag-set wire format."""

    key: str
    value: str


@dataclass(frozen=True)
class WebsiteConfiguration:
    """Static website hosting configuration for a bucket."""

    index_suffix: str | None = None
    error_key: str | None = None


@dataclass(frozen=True)
class BucketDesiredState:
    """Desired configuration of a bucket, immutable for one reconciliation pass."""

    name: str
    acl: str = DEFAULT_ACL
    website: bool = False
    index_document: str = ""
    error_document: str = ""
    tags: dict[str, str] = field(default_factory=dict)


@dataclass
class BucketObservedState:
    """Observed state of a bucket, written by the reconciler.

    An empty identity means the bucket is not known to exist remotely.
    """

    identity: str = ""
    tags: dict[str, str] = field(default_factory=dict)

    @property
    def exists(self) -> bool:
        return bool(self.identity)
