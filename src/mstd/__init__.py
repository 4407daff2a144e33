"""
mstd — стандартная библиотека value-oriented примитивов для host language

Содержит:
- core.math: скалярная арифметика и transformers (sqrt через Newton's method)
- core.text: операции над строками
- core.sequence: immutable sequences (rebuild-by-index, map/filter/reverse/sort)
- chain: postfix transformer chaining поверх Registry
- modules: library modules math / string / array / core
"""

from mstd.chain import Chain, Registry, apply_chain, chain, run_chain_document
from mstd.config import LibraryConfig, load_config
from mstd.errors import (
    SequenceIndexError,
    StdlibError,
    UnknownFunctionError,
    UnknownTransformerError,
)
from mstd.log import setup_logging
from mstd.modules import default_registry, load_module, new_registry

__version__ = "0.1.0"

__all__ = [
    # Chain
    "Chain",
    "Registry",
    "chain",
    "apply_chain",
    "run_chain_document",
    # Modules
    "load_module",
    "new_registry",
    "default_registry",
    # Config / logging
    "LibraryConfig",
    "load_config",
    "setup_logging",
    # Errors
    "StdlibError",
    "SequenceIndexError",
    "UnknownFunctionError",
    "UnknownTransformerError",
]
