"""
Contract Validation Module

Валидация JSON контрактов значений, пересекающих границы компонентов.
"""

from .validators import (
    ContractValidator,
    OrderValidator,
    SchemaLoader,
    validate_order,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "OrderValidator",
    # Functions
    "validate_order",
]
