"""API group and version of the memcached resources."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GroupVersion:
    """An API group together with its version."""

    group: str
    version: str

    def api_version(self) -> str:
        """Return the ``apiVersion`` string, ``group/version``."""
        if not self.group:
            return self.version
        return f"{self.group}/{self.version}"

    def with_kind(self, kind: str) -> dict[str, str]:
        """Return the type header of an object of ``kind`` in this group version."""
        if not kind:
            raise ValueError("kind must not be empty")
        return {"apiVersion": self.api_version(), "kind": kind}


GROUP_VERSION = GroupVersion(group="memcached.openstack.org", version="v1beta1")