"""Dependency graph with a depth-first topological ordering."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass
class _Node(Generic[T]):
    item: T
    dependencies: list[int] = field(default_factory=list)


class DAG(Generic[T]):
    """Nodes holding items, with edges from a dependent to its dependencies."""

    def __init__(self) -> None:
        self._nodes: list[_Node[Any]] = []
        self._sorted: list[int] = []

    def __len__(self) -> int:
        return len(self._nodes)

    def add_node(self, item: T) -> int:
        """Add a node holding ``item`` and return its index."""
        self._nodes.append(_Node(item))
        return len(self._nodes) - 1

    def add_dependency(self, dependent: int, dependency: int) -> None:
        """Record that node ``dependent`` depends on node ``dependency``."""
        for index in (dependent, dependency):
            if not 0 <= index < len(self._nodes):
                raise IndexError(f"no node with index {index}")
        self._nodes[dependent].dependencies.append(dependency)

    def sort(self) -> None:
        """Order the nodes so that every node comes after its dependencies."""
        explored = [False] * len(self._nodes)
        order: list[int] = []
        for root in range(len(self._nodes)):
            if explored[root]:
                continue
            explored[root] = True
            stack = [(root, iter(self._nodes[root].dependencies))]
            while stack:
                node, pending = stack[-1]
                for dependency in pending:
                    if not explored[dependency]:
                        explored[dependency] = True
                        stack.append((dependency, iter(self._nodes[dependency].dependencies)))
                        break
                else:
                    stack.pop()
                    order.append(node)
        self._sorted = order

    def sorted_list(self) -> list[int]:
        """Node indices in the order computed by the last :meth:`sort`."""
        return list(self._sorted)