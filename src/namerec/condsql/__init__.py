"""
condsql - conditions to SQL

Translate nested condition mappings into parameterized WHERE fragments.
"""

from namerec.condsql.aggregator import build_all
from namerec.condsql.builder import WhereClauseBuilder
from namerec.condsql.config import BuilderConfig
from namerec.condsql.config import get_default_config
from namerec.condsql.config import reset_default_config
from namerec.condsql.config import set_default_config
from namerec.condsql.constants import MISSING
from namerec.condsql.constants import ConditionOperator
from namerec.condsql.dialects import SqlglotQuoter
from namerec.condsql.dialects import get_quoter
from namerec.condsql.dialects import plain_identifier
from namerec.condsql.dispatcher import build_condition
from namerec.condsql.dispatcher import classify
from namerec.condsql.dispatcher import classify_and_build
from namerec.condsql.exceptions import ConditionError
from namerec.condsql.exceptions import ConditionInvariantError
from namerec.condsql.exceptions import EmptyValueListError
from namerec.condsql.exceptions import IncompleteCustomOperatorError
from namerec.condsql.exceptions import InvalidElementTypeError
from namerec.condsql.exceptions import MissingValueError
from namerec.condsql.exceptions import TypeMismatchError
from namerec.condsql.exceptions import UnsupportedOperatorError
from namerec.condsql.exceptions import WrongArityError
from namerec.condsql.types import ConditionValue
from namerec.condsql.types import CustomOperator
from namerec.condsql.types import NestedConditions
from namerec.condsql.types import NullCheck
from namerec.condsql.types import Scalar
from namerec.condsql.types import ValueList
from namerec.condsql.types import WhereClause
from namerec.condsql.validators import validate_operator
from namerec.condsql.validators import validate_value

__version__ = '1.0'

__all__ = [
    # Builder
    'WhereClauseBuilder',
    'WhereClause',
    'build_all',
    'classify',
    'classify_and_build',
    'build_condition',
    # Validation
    'validate_operator',
    'validate_value',
    # Types
    'ConditionOperator',
    'ConditionValue',
    'CustomOperator',
    'NestedConditions',
    'NullCheck',
    'Scalar',
    'ValueList',
    'MISSING',
    # Configuration
    'BuilderConfig',
    'get_default_config',
    'set_default_config',
    'reset_default_config',
    'SqlglotQuoter',
    'get_quoter',
    'plain_identifier',
    # Exceptions
    'ConditionError',
    'ConditionInvariantError',
    'EmptyValueListError',
    'IncompleteCustomOperatorError',
    'InvalidElementTypeError',
    'MissingValueError',
    'TypeMismatchError',
    'UnsupportedOperatorError',
    'WrongArityError',
]
