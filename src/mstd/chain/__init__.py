"""
Transformer chaining: registry, fluent Chain, декларативные chain-документы.
"""

from mstd.chain.chain import Chain, apply_chain, chain, resolve_registry
from mstd.chain.document import (
    ChainDocument,
    ChainLink,
    parse_chain_document,
    run_chain_document,
)
from mstd.chain.registry import (
    ReceiverKind,
    Registry,
    TransformerBinding,
    receiver_kind,
)

__all__ = [
    # Registry
    "Registry",
    "ReceiverKind",
    "TransformerBinding",
    "receiver_kind",
    # Chain
    "Chain",
    "chain",
    "apply_chain",
    "resolve_registry",
    # Documents
    "ChainDocument",
    "ChainLink",
    "parse_chain_document",
    "run_chain_document",
]
