"""Marker category lookup.

A marker's category is the name of the template (component) it was
instanced from. Lookups may be slow or fail; a failure only costs that
marker its category, it never fails the floor.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping, Sequence
from typing import Protocol

from floorsight.engine.errors import CategoryLookupError
from floorsight.scene.nodes import SceneNode

logger = logging.getLogger(__name__)

UNKNOWN_CATEGORY = ""


class CategoryLookup(Protocol):
    async def lookup(self, node: SceneNode) -> str: ...


class ComponentRegistryLookup:
    """Resolves ``component_id`` against the document's component table."""

    def __init__(self, components: Mapping[str, str] | None = None) -> None:
        self._components = dict(components or {})

    async def lookup(self, node: SceneNode) -> str:
        if node.component_id is None:
            raise CategoryLookupError(f"{node.name} has no component reference")
        try:
            return self._components[node.component_id]
        except KeyError:
            raise CategoryLookupError(
                f"Unknown component {node.component_id!r} for {node.name}"
            ) from None


async def resolve_categories(
    markers: Sequence[SceneNode],
    lookup: CategoryLookup,
    timeout_s: float = 5.0,
    max_concurrency: int = 32,
    semaphore: asyncio.Semaphore | None = None,
) -> list[str]:
    """Look up every marker concurrently; result order matches ``markers``.

    Pass ``semaphore`` to share one concurrency bound across several calls;
    otherwise a new one of size ``max_concurrency`` is used.
    """
    if semaphore is None:
        semaphore = asyncio.Semaphore(max(1, max_concurrency))

    async def _one(node: SceneNode) -> str:
        async with semaphore:
            return await asyncio.wait_for(lookup.lookup(node), timeout=timeout_s)

    results = await asyncio.gather(*(_one(m) for m in markers), return_exceptions=True)

    categories: list[str] = []
    for node, result in zip(markers, results):
        if isinstance(result, BaseException):
            if isinstance(result, asyncio.CancelledError):
                raise result
            logger.warning("Category lookup failed for %s: %r", node.name, result)
            categories.append(UNKNOWN_CATEGORY)
        else:
            categories.append(result or UNKNOWN_CATEGORY)
    return categories
