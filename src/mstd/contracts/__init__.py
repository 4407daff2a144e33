"""
Contract Validation Module

Валидация декларативных chain-документов по JSON Schema.
"""

from .validators import (
    ChainDocumentValidator,
    ContractValidator,
    SchemaLoader,
    validate_chain_document,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ChainDocumentValidator",
    # Functions
    "validate_chain_document",
]
