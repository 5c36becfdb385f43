"""vectornodes evaluation engine."""

from vectornodes.engine.config import EvaluationConfig
from vectornodes.engine.executor import EvaluationReport, Executor, create_executor
from vectornodes.engine.footprint import Footprint
from vectornodes.engine.node import FnNode, FootprintNode, Node, NodeFn, ValueNode, node_fn

__all__ = [
    "EvaluationConfig",
    "EvaluationReport",
    "Executor",
    "create_executor",
    "Footprint",
    "FnNode",
    "FootprintNode",
    "Node",
    "NodeFn",
    "ValueNode",
    "node_fn",
]
