"""
Validation of authority tuples before enumeration.
"""

from ucca.validation.authority_validator import (
    AuthorityValidator,
    validate_authority,
)

__all__ = [
    "AuthorityValidator",
    "validate_authority",
]
