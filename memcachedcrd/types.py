"""Memcached custom resource: spec, status, conditions and helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Iterator

from .groupversion import GROUP_VERSION

MEMCACHED_CONTAINER_IMAGE = (
    "quay.io/podified-antelope-centos9/openstack-memcached:current-podified"
)
KIND = "Memcached"
LIST_KIND = "MemcachedList"

READY_CONDITION = "Ready"
READY_REASON = "Ready"
READY_MESSAGE = "Setup complete"

STATUS_TRUE = "True"
STATUS_FALSE = "False"
STATUS_UNKNOWN = "Unknown"


def _now() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


@dataclass
class Condition:
    """One observed condition of a resource."""

    type: str
    status: str = STATUS_UNKNOWN
    reason: str = ""
    severity: str = ""
    message: str = ""
    last_transition_time: str = ""

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "type": self.type,
            "status": self.status,
            "lastTransitionTime": self.last_transition_time,
        }
        for key, value in (
            ("severity", self.severity),
            ("reason", self.reason),
            ("message", self.message),
        ):
            if value:
                data[key] = value
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Condition":
        if "type" not in data:
            raise ValueError("condition has no type")
        return cls(
            type=data["type"],
            status=data.get("status", STATUS_UNKNOWN),
            reason=data.get("reason", ""),
            severity=data.get("severity", ""),
            message=data.get("message", ""),
            last_transition_time=data.get("lastTransitionTime", ""),
        )


class Conditions:
    """An ordered set of conditions, at most one per type."""

    def __init__(self, conditions: list[Condition] | None = None) -> None:
        self._items: list[Condition] = []
        for condition in conditions or []:
            self.set(condition)

    def __iter__(self) -> Iterator[Condition]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Conditions):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"Conditions({self._items!r})"

    def set(self, condition: Condition) -> None:
        """Add ``condition`` or replace the one of the same type."""
        for index, existing in enumerate(self._items):
            if existing.type != condition.type:
                continue
            unchanged = (
                existing.status == condition.status
                and existing.reason == condition.reason
                and existing.severity == condition.severity
                and existing.message == condition.message
            )
            if unchanged:
                return
            if not condition.last_transition_time:
                condition.last_transition_time = (
                    existing.last_transition_time
                    if existing.status == condition.status
                    else _now()
                )
            self._items[index] = condition
            return
        if not condition.last_transition_time:
            condition.last_transition_time = _now()
        self._items.append(condition)

    def get(self, condition_type: str) -> Condition | None:
        """Return the condition of ``condition_type``, or None."""
        return next((c for c in self._items if c.type == condition_type), None)

    def is_true(self, condition_type: str) -> bool:
        """Tell whether the condition of ``condition_type`` has status True."""
        condition = self.get(condition_type)
        return condition is not None and condition.status == STATUS_TRUE

    def mark_true(self, condition_type: str, message: str) -> None:
        """Set the condition of ``condition_type`` to True with ``message``."""
        self.set(
            Condition(
                type=condition_type,
                status=STATUS_TRUE,
                reason=READY_REASON,
                message=message,
            )
        )

    def to_list(self) -> list[dict[str, Any]]:
        return [c.to_dict() for c in self._items]

    @classmethod
    def from_list(cls, data: list[dict[str, Any]] | None) -> "Conditions":
        return cls([Condition.from_dict(item) for item in data or []])


@dataclass
class TLSSimpleService:
    """TLS settings of a service: certificate secret and CA bundle."""

    secret_name: str | None = None
    ca_bundle_secret_name: str = ""


@dataclass
class ObjectMeta:
    """The metadata of an object that the memcached resource uses."""

    name: str = ""
    namespace: str = ""
    generation: int = 0
    labels: dict[str, str] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)


@dataclass
class MemcachedSpecCore:
    """Spec fields shared with the control plane resource (no images)."""

    replicas: int | None = 1
    tls: TLSSimpleService = field(default_factory=TLSSimpleService)


@dataclass
class MemcachedSpec(MemcachedSpecCore):
    """Desired state of a Memcached."""

    container_image: str = ""


@dataclass
class MemcachedStatus:
    """Observed state of a Memcached."""

    hash: dict[str, str] = field(default_factory=dict)
    ready_count: int = 0
    conditions: Conditions = field(default_factory=Conditions)
    server_list: list[str] = field(default_factory=list)
    server_list_with_inet: list[str] = field(default_factory=list)
    tls_support: bool = False
    observed_generation: int = 0


def _meta_to_dict(meta: ObjectMeta) -> dict[str, Any]:
    data: dict[str, Any] = {}
    for key, value in (
        ("name", meta.name),
        ("namespace", meta.namespace),
        ("generation", meta.generation),
        ("labels", meta.labels),
        ("annotations", meta.annotations),
    ):
        if value:
            data[key] = dict(value) if isinstance(value, dict) else value
    return data


def _meta_from_dict(data: dict[str, Any] | None) -> ObjectMeta:
    data = data or {}
    return ObjectMeta(
        name=data.get("name", ""),
        namespace=data.get("namespace", ""),
        generation=int(data.get("generation", 0)),
        labels=dict(data.get("labels") or {}),
        annotations=dict(data.get("annotations") or {}),
    )


def _tls_to_dict(tls: TLSSimpleService) -> dict[str, Any]:
    data: dict[str, Any] = {}
    if tls.secret_name is not None:
        data["secretName"] = tls.secret_name
    if tls.ca_bundle_secret_name:
        data["caBundleSecretName"] = tls.ca_bundle_secret_name
    return data


def _tls_from_dict(data: dict[str, Any] | None) -> TLSSimpleService:
    data = data or {}
    return TLSSimpleService(
        secret_name=data.get("secretName"),
        ca_bundle_secret_name=data.get("caBundleSecretName", ""),
    )


def _spec_to_dict(spec: MemcachedSpec) -> dict[str, Any]:
    return {
        "replicas": spec.replicas,
        "tls": _tls_to_dict(spec.tls),
        "containerImage": spec.container_image,
    }


def _spec_from_dict(data: dict[str, Any] | None) -> MemcachedSpec:
    data = data or {}
    replicas = data.get("replicas", 1)
    return MemcachedSpec(
        replicas=None if replicas is None else int(replicas),
        tls=_tls_from_dict(data.get("tls")),
        container_image=data.get("containerImage", ""),
    )


def _status_to_dict(status: MemcachedStatus) -> dict[str, Any]:
    data: dict[str, Any] = {}
    if status.hash:
        data["hash"] = dict(status.hash)
    if status.ready_count:
        data["readyCount"] = status.ready_count
    if len(status.conditions):
        data["conditions"] = status.conditions.to_list()
    if status.server_list:
        data["serverList"] = list(status.server_list)
    if status.server_list_with_inet:
        data["serverListWithInet"] = list(status.server_list_with_inet)
    if status.tls_support:
        data["tlsSupport"] = True
    if status.observed_generation:
        data["observedGeneration"] = status.observed_generation
    return data


def _status_from_dict(data: dict[str, Any] | None) -> MemcachedStatus:
    data = data or {}
    return MemcachedStatus(
        hash=dict(data.get("hash") or {}),
        ready_count=int(data.get("readyCount", 0)),
        conditions=Conditions.from_list(data.get("conditions")),
        server_list=list(data.get("serverList") or []),
        server_list_with_inet=list(data.get("serverListWithInet") or []),
        tls_support=bool(data.get("tlsSupport", False)),
        observed_generation=int(data.get("observedGeneration", 0)),
    )


def _check_header(data: dict[str, Any], kind: str) -> None:
    api_version = data.get("apiVersion")
    if api_version is not None and api_version != GROUP_VERSION.api_version():
        raise ValueError(f"unexpected apiVersion {api_version!r}")
    found = data.get("kind")
    if found is not None and found != kind:
        raise ValueError(f"unexpected kind {found!r}, expected {kind!r}")


@dataclass
class Memcached:
    """A memcached cluster resource."""

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: MemcachedSpec = field(default_factory=MemcachedSpec)
    status: MemcachedStatus = field(default_factory=MemcachedStatus)

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def namespace(self) -> str:
        return self.metadata.namespace

    def is_ready(self) -> bool:
        """Tell whether the resource was reconciled successfully."""
        return self.status.conditions.is_true(READY_CONDITION)

    def rbac_conditions_set(self, condition: Condition) -> None:
        """Record a condition reported by the RBAC objects."""
        self.status.conditions.set(condition)

    def rbac_namespace(self) -> str:
        """Namespace of the RBAC objects."""
        return self.metadata.namespace

    def rbac_resource_name(self) -> str:
        """Name for the service account, role and role binding."""
        return "memcached-" + self.metadata.name

    def server_list_string(self) -> str:
        """Servers as a comma separated list."""
        return ",".join(self.status.server_list)

    def server_list_quoted_string(self) -> str:
        """Servers, each quoted, as a comma separated list."""
        return "'" + "','".join(self.status.server_list) + "'"

    def server_list_with_inet_string(self) -> str:
        """Servers with inet prefix as a comma separated list."""
        return ",".join(self.status.server_list_with_inet)

    def server_list_with_inet_quoted_string(self) -> str:
        """Servers with inet prefix, each quoted, as a comma separated list."""
        return "'" + "','".join(self.status.server_list_with_inet) + "'"

    def tls_support(self) -> bool:
        """Tell whether the instance supports TLS."""
        return self.status.tls_support

    def to_dict(self) -> dict[str, Any]:
        """Return the resource as a JSON-ready mapping."""
        data = GROUP_VERSION.with_kind(KIND)
        return {
            **data,
            "metadata": _meta_to_dict(self.metadata),
            "spec": _spec_to_dict(self.spec),
            "status": _status_to_dict(self.status),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Memcached":
        """Build a resource from a mapping as produced by ``to_dict``."""
        _check_header(data, KIND)
        return cls(
            metadata=_meta_from_dict(data.get("metadata")),
            spec=_spec_from_dict(data.get("spec")),
            status=_status_from_dict(data.get("status")),
        )


@dataclass
class MemcachedList:
    """A list of Memcached resources."""

    items: list[Memcached] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            **GROUP_VERSION.with_kind(LIST_KIND),
            "metadata": {},
            "items": [item.to_dict() for item in self.items],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MemcachedList":
        _check_header(data, LIST_KIND)
        return cls(items=[Memcached.from_dict(item) for item in data.get("items") or []])