"""
Namespace rules applied around cluster calls.

Two independent rules: created objects without a namespace land in the default
namespace, and list results drop objects living in reserved system namespaces.
Nodes are cluster-scoped and never pass through the exclusion filter.
"""

from collections.abc import Iterable
from typing import Any, TypeVar

from kubernetes import client

from kube_gateway.config import RESERVED_NAMESPACES

DEFAULT_NAMESPACE = "default"

T = TypeVar("T")


def apply_default_namespace(obj: Any, default: str = DEFAULT_NAMESPACE) -> str:
    """Set ``obj.metadata.namespace`` to ``default`` when it is empty.

    Returns the namespace the object will be submitted to.
    """
    if obj.metadata is None:
        obj.metadata = client.V1ObjectMeta()
    if not obj.metadata.namespace:
        obj.metadata.namespace = default
    return obj.metadata.namespace


def exclude_reserved(items: Iterable[T], reserved: Iterable[str] = RESERVED_NAMESPACES) -> list[T]:
    """Drop every item whose namespace is one of ``reserved``."""
    hidden = frozenset(reserved)
    return [
        item
        for item in items
        if getattr(getattr(item, "metadata", None), "namespace", None) not in hidden
    ]
