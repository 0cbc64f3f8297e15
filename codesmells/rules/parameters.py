"""
Parameter list rule.

Flags methods declaring more parameters than PARAMETER_COUNT_LIMIT.
The raw count is used: params arrays and optional parameters count too.
"""
from . import RuleContext
from ..data_structures import SmellKind
from ..syntax import MethodDecl

PARAMETER_COUNT_LIMIT = 4


def check_parameter_list(node: MethodDecl, context: RuleContext) -> None:
    """Report LongParamList at the method's declaration line."""
    if node.parameter_count > PARAMETER_COUNT_LIMIT:
        context.report(SmellKind.LONG_PARAM_LIST, context.line_of(node))
