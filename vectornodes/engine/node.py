"""Nodes: units of computation evaluated under a Footprint.

Usage:
    @node_fn(name="Repeat", description="Repeat paths along a direction")
    def repeat(vector_data: VectorData, direction, count: int) -> VectorData:
        ...

    repeat(vector_data, direction=(5, 0), count=2)            # plain call
    node = repeat.node(ValueNode(vector_data), direction=(5, 0), count=2)
    result = await node.eval(footprint)

A node function takes ownership of its first argument and may mutate and
return it. Composite nodes await their upstream nodes with the footprint
they were given and nothing else.
"""

from __future__ import annotations

import copy
import inspect
import logging
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from vectornodes.engine.footprint import Footprint

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Node(ABC, Generic[T]):
    """Evaluate under a Footprint, asynchronously, producing a ``T``."""

    name: str = ""

    @abstractmethod
    async def eval(self, footprint: Footprint) -> T: ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name or '-'})"


class ValueNode(Node[T]):
    """Leaf node holding a materialized value.

    Every evaluation gets its own deep copy, so downstream nodes can mutate
    the result without touching other evaluations.
    """

    def __init__(self, value: T, name: str = "Value") -> None:
        self.value = value
        self.name = name

    async def eval(self, footprint: Footprint) -> T:
        return copy.deepcopy(self.value)


class FootprintNode(Node[T]):
    """Leaf node computing its value from the footprint (sync or async ``fn``)."""

    def __init__(self, fn: Callable[[Footprint], T | Awaitable[T]], name: str = "") -> None:
        self.fn = fn
        self.name = name or getattr(fn, "__name__", "Footprint")

    async def eval(self, footprint: Footprint) -> T:
        result = self.fn(footprint)
        if inspect.isawaitable(result):
            result = await result
        return result


@dataclass
class NodeFn(Generic[T]):
    """A pure node function plus the metadata to lift it into a graph node."""

    name: str
    fn: Callable[..., T]
    description: str = ""
    signature: inspect.Signature = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.signature = inspect.signature(self.fn)

    def __call__(self, value: Any, /, *args: Any, **params: Any) -> T:
        return self.fn(value, *args, **params)

    def node(self, upstream: Node[Any], /, **params: Any) -> FnNode[T]:
        """Build a node applying this function to ``upstream``'s value."""
        # Unknown or missing parameters raise TypeError here
        self.signature.bind(None, **params)
        return FnNode(self, upstream, params)


class FnNode(Node[T]):
    """Awaits its upstream, then applies a NodeFn with bound parameters."""

    def __init__(self, spec: NodeFn[T], upstream: Node[Any], params: dict[str, Any]) -> None:
        self.spec = spec
        self.upstream = upstream
        self.params = params
        self.name = spec.name

    async def eval(self, footprint: Footprint) -> T:
        value = await self.upstream.eval(footprint)
        return self.spec(value, **self.params)


def node_fn(*, name: str, description: str = ""):
    """Decorator turning a pure function into a NodeFn."""

    def decorator(fn: Callable[..., T]) -> NodeFn[T]:
        spec = NodeFn(name=name, fn=fn, description=description)
        logger.debug("Defined node %s", name)
        return spec

    return decorator
