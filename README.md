# memcachedcrd

A Python model of the `Memcached` custom resource
(`memcached.openstack.org/v1beta1`), with the defaulting and validation hooks
that are applied to it on admission. The package has no dependencies beyond
the standard library.

## Installation

```
pip install memcachedcrd
```

## Group and version

`memcachedcrd.groupversion` defines the frozen dataclass `GroupVersion` and the
instance `GROUP_VERSION` for `memcached.openstack.org` / `v1beta1`.

```python
from memcachedcrd.groupversion import GROUP_VERSION

GROUP_VERSION.api_version()           # "memcached.openstack.org/v1beta1"
GROUP_VERSION.with_kind("Memcached")  # {"apiVersion": "...", "kind": "Memcached"}
```

`with_kind()` raises `ValueError` for an empty kind.

## The resource

`memcachedcrd.types` provides the dataclasses `Memcached`, `MemcachedSpec`
(which extends `MemcachedSpecCore` with `container_image`), `MemcachedStatus`,
`ObjectMeta`, `TLSSimpleService`, `Condition` and `MemcachedList`, plus the
`Conditions` collection. `MEMCACHED_CONTAINER_IMAGE` holds the fall-back
container image.

`Memcached.to_dict()` and `Memcached.from_dict()` convert to and from the
JSON-shaped form used by the Kubernetes API; `MemcachedList` does the same for
lists. `from_dict()` raises `ValueError` when `apiVersion` or `kind` is present
but does not match. A missing `spec.replicas` defaults to 1.

```python
from memcachedcrd.types import Memcached

mc = Memcached.from_dict({
    "apiVersion": "memcached.openstack.org/v1beta1",
    "kind": "Memcached",
    "metadata": {"name": "memcached", "namespace": "openstack"},
    "spec": {"replicas": 3},
    "status": {"serverList": ["memcached-0.memcached.openstack.svc:11211"]},
})

mc.name                          # "memcached"
mc.is_ready()                    # True once the Ready condition is True
mc.rbac_resource_name()          # "memcached-memcached"
mc.rbac_namespace()              # "openstack"
mc.server_list_string()          # servers joined by ","
mc.server_list_quoted_string()   # each server in single quotes, joined by ","
mc.server_list_with_inet_string()
mc.server_list_with_inet_quoted_string()
mc.tls_support()                 # status.tls_support
```

### Conditions

`Conditions` keeps at most one `Condition` per type, in insertion order.
`set()` adds a condition or replaces the one of the same type; an identical
condition is left as it is, and the last transition time is kept when the
status does not change. `get()` returns the condition of a type or `None`,
`is_true()` tells whether its status is `"True"`, and `mark_true(type, message)`
sets it to `"True"` with reason `"Ready"`. `Memcached.rbac_conditions_set()`
records a condition on the resource's status.

## Defaulting and validation

`memcachedcrd.webhook` holds the admission side:

```python
import os
from memcachedcrd.webhook import setup_defaults, default_memcached, validate_create

setup_defaults(os.environ)   # reads RELATED_IMAGE_INFRA_MEMCACHED_IMAGE_URL_DEFAULT
default_memcached(mc)        # fills spec.container_image when it is empty
warnings = validate_create(mc)
```

`setup_defaults()` falls back to `MEMCACHED_CONTAINER_IMAGE` when the variable
is unset, installs the result and returns it. `setup_memcached_defaults()`
installs a `MemcachedDefaults` directly and `current_defaults()` returns what
is in effect. `default_spec()` applies the defaults to a spec alone.

`validate_create()`, `validate_update()` and `validate_delete()` log the call
and return an empty list of warnings: every resource is accepted.

## What this package does not do

It only models the resource and applies the hooks in-process. It does not talk
to a Kubernetes cluster, run a controller that reconciles memcached
deployments, or serve an admission webhook over HTTPS.

## Running the tests

```
pip install -e .[test]
pytest
```