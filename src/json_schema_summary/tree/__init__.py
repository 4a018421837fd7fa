"""Tree subpackage: the path tree accumulated while scanning.

Re-exports the public API for the tree module:
- Tree: arena of Node records addressed by integer index
- Node: one vertex per distinct path, with visit frequency and raw samples
- TypeValue / ValueKind: tagged scalar sample
- TreeBuilder: folds scanner events into a Tree
"""

from json_schema_summary.tree.builder import TreeBuilder
from json_schema_summary.tree.nodes import ROOT, Node, Tree, TypeValue, ValueKind

__all__ = ["ROOT", "Node", "Tree", "TreeBuilder", "TypeValue", "ValueKind"]
