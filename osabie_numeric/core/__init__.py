"""
Core domain models, numeric primitives, and invariants.

This module contains the foundational building blocks of the interpreter's
numeric semantics, independent of the command dispatcher and the stack machine.
"""
