"""bindable: Maybe and Either containers chained with bind and map.

Flat imports (preferred):
    from bindable import Maybe, present, absent, Either, success, failure
    from bindable import parse_text, safe, bind, fmap

Submodule imports (for organization):
    from bindable.maybe import Present, Absent
    from bindable.either import Success, Failure
    from bindable.pipelines import extract_numeric_field
"""

# Configuration
from bindable._config import Config, get_config, init

# Capability contract
from bindable.capability import Monad, bind, fmap

# Decode adapter
from bindable.decode import parse_text

# Either
from bindable.either import Either, Failure, Success, failure, success

# Errors
from bindable.errors import DomainError, MissingFieldError, WrongBranchError

# Maybe
from bindable.maybe import Absent, AbsentType, Maybe, Present, absent, present
from bindable.safe import safe

# Typeclass
from bindable.typeclass import NoInstanceError, typeclass

__all__ = [
    # Maybe
    'Absent',
    'AbsentType',
    # Configuration
    'Config',
    # Errors
    'DomainError',
    # Either
    'Either',
    'Failure',
    'Maybe',
    'MissingFieldError',
    # Capability contract
    'Monad',
    'NoInstanceError',
    'Present',
    'Success',
    'WrongBranchError',
    'absent',
    'bind',
    'failure',
    'fmap',
    'get_config',
    'init',
    # Decode adapter
    'parse_text',
    'present',
    'safe',
    'success',
    'typeclass',
]
