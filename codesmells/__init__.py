"""codesmells - structural code smell detection for C# sources."""

from codesmells.config import DEFAULT_WHITELISTS, Whitelists
from codesmells.data_structures import UNLOCATED, FileRecord, Finding, SmellKind
from codesmells.exceptions import CodeSmellsError, ParseError, TraversalError
from codesmells.frontend import discover_sources, parse_file, parse_source
from codesmells.orchestrator import analyze_file, analyze_project, analyze_tree
from codesmells.report import format_json, format_matrix, format_text

__version__ = "0.1.0"

__all__ = [
    # Analysis
    "analyze_tree",
    "analyze_file",
    "analyze_project",
    # Frontend
    "discover_sources",
    "parse_source",
    "parse_file",
    # Reporting
    "format_text",
    "format_matrix",
    "format_json",
    # Models
    "FileRecord",
    "Finding",
    "SmellKind",
    "UNLOCATED",
    "Whitelists",
    "DEFAULT_WHITELISTS",
    # Exceptions
    "CodeSmellsError",
    "ParseError",
    "TraversalError",
]
