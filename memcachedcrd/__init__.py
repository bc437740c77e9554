"""Model, defaulting and validation for the Memcached custom resource."""

__version__ = "0.1.0"
__all__ = ["groupversion", "types", "webhook"]