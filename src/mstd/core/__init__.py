"""
Core primitives: numeric, text, immutable sequences, I/O collaborators.

Все операции чистые и не зависят от Registry / chain.
"""
