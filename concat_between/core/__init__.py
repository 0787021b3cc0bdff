"""Token model, token sources, and the concatenation filter.

WHY: The core package holds everything that touches tokens directly:
the immutable Token value type, the TokenStream pull interface, and the
ConcatenateBetweenFilter state machine built on top of it.

HOW: ir.py defines the data types, stream.py the source interface and
two concrete sources, concatenator.py the filter itself.

RULES:
- Token is immutable; builders produce new Token instances
- Every filter is itself a TokenStream, so filters chain
"""
