"""Defaulting and validation of Memcached resources."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

from .types import MEMCACHED_CONTAINER_IMAGE, Memcached, MemcachedSpec

IMAGE_ENV_VAR = "RELATED_IMAGE_INFRA_MEMCACHED_IMAGE_URL_DEFAULT"

log = logging.getLogger("memcached-resource")


@dataclass(frozen=True)
class MemcachedDefaults:
    """Defaults applied to Memcached specs."""

    container_image_url: str = ""


_defaults = MemcachedDefaults()


def setup_memcached_defaults(defaults: MemcachedDefaults) -> None:
    """Install the defaults used by the defaulting hooks."""
    global _defaults
    _defaults = defaults
    log.info("Memcached defaults initialized: %s", defaults)


def current_defaults() -> MemcachedDefaults:
    """Return the defaults in use."""
    return _defaults


def setup_defaults(environ: Mapping[str, str] | None = None) -> MemcachedDefaults:
    """Initialise defaults from the environment and return them."""
    env = os.environ if environ is None else environ
    defaults = MemcachedDefaults(
        container_image_url=env.get(IMAGE_ENV_VAR, MEMCACHED_CONTAINER_IMAGE)
    )
    setup_memcached_defaults(defaults)
    return defaults


def default_spec(spec: MemcachedSpec) -> None:
    """Fill unset fields of ``spec`` from the defaults."""
    if spec.container_image == "":
        spec.container_image = _defaults.container_image_url


def default_memcached(memcached: Memcached) -> None:
    """Apply defaults to a Memcached resource in place."""
    log.info("default name=%s", memcached.name)
    default_spec(memcached.spec)


def validate_create(memcached: Memcached) -> list[str]:
    """Validate a new resource; return warnings."""
    log.info("validate create name=%s", memcached.name)
    return []


def validate_update(memcached: Memcached, old: Memcached) -> list[str]:
    """Validate an update of a resource; return warnings."""
    log.info("validate update name=%s", memcached.name)
    return []


def validate_delete(memcached: Memcached) -> list[str]:
    """Validate deletion of a resource; return warnings."""
    log.info("validate delete name=%s", memcached.name)
    return []