"""Condition builders, one module per operator family."""

from namerec.condsql.builders.comparison import build_basic_comparison
from namerec.condsql.builders.membership import build_membership
from namerec.condsql.builders.protocol import ConditionBuilder
from namerec.condsql.builders.range import build_range
from namerec.condsql.builders.special import build_null_check
from namerec.condsql.builders.special import build_truth_check

__all__ = [
    'ConditionBuilder',
    'build_basic_comparison',
    'build_membership',
    'build_null_check',
    'build_range',
    'build_truth_check',
]
