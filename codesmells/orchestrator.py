"""
Orchestrator

Glue layer. Wires discovery, parsing, the walker and the rules together.
No thresholds and no classification logic live here.
"""
import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from .config import DEFAULT_WHITELISTS, Whitelists
from .data_structures import FileRecord
from .exceptions import CodeSmellsError
from .frontend import discover_sources, parse_file
from .rules import (
    Rule,
    RuleContext,
    check_data_class,
    check_literal,
    check_method_size,
    check_parameter_list,
    enter_class,
    enter_namespace,
)
from .syntax import Node, NodeKind, SyntaxTree
from .walker import walk_tree

logger = logging.getLogger(__name__)


# Rules run in the listed order for each visited node
_RULES_BY_KIND: Dict[NodeKind, Tuple[Rule, ...]] = {
    NodeKind.NAMESPACE:            (enter_namespace,),
    NodeKind.CLASS_DECL:           (enter_class, check_data_class),
    NodeKind.METHOD_DECL:          (check_parameter_list, check_method_size),
    NodeKind.LITERAL:              (check_literal,),
    NodeKind.FIELD_DECL:           (),
    NodeKind.PARAMETER_LIST:       (),
    NodeKind.STATEMENT:            (),
    NodeKind.RETURN_STATEMENT:     (),
    NodeKind.EXPRESSION_STATEMENT: (),
    NodeKind.ASSIGNMENT:           (),
    NodeKind.OTHER:                (),
}


assert set(_RULES_BY_KIND) == set(NodeKind), "every node kind needs a dispatch entry"


def analyze_tree(tree: SyntaxTree, whitelists: Optional[Whitelists] = None) -> FileRecord:
    """Run every rule over one tree in a single pass."""
    context = RuleContext(tree=tree, whitelists=whitelists or DEFAULT_WHITELISTS)

    def visit(node: Node) -> None:
        for rule in _RULES_BY_KIND[node.kind]:
            rule(node, context)

    walk_tree(tree, visit)
    return context.freeze()


def analyze_file(path: str | Path, whitelists: Optional[Whitelists] = None) -> FileRecord:
    """
    Parse and analyze one C# file.

    Raises:
        ParseError: If the file is not well-formed C#.
        TraversalError: If the parsed tree is cyclic.
        OSError: If the file cannot be read.
    """
    tree = parse_file(path)
    record = analyze_tree(tree, whitelists)
    logger.debug("Analyzed %s: %d smells", path, record.total_smell_count)
    return record


def analyze_project(root: str | Path, whitelists: Optional[Whitelists] = None) -> List[FileRecord]:
    """
    Analyze every C# file under root.

    Files that fail to read, parse or traverse are logged and skipped;
    the rest of the run continues. Records are sorted by path.
    """
    root_path = Path(root)
    if not root_path.exists():
        raise FileNotFoundError(f"Path does not exist: {root_path}")

    records = []

    for path in discover_sources(root_path):
        try:
            records.append(analyze_file(path, whitelists))
        except (CodeSmellsError, OSError) as e:
            logger.warning("Skipping %s: %s", path, e)

    return sorted(records)
