# tests/property/__init__.py
"""Property-based tests for ensure.

Property-based testing validates invariants that must hold for ALL inputs,
not just the specific examples we think of.

Test modules:
- test_format_args_properties: placeholder numbering and argument counts
- test_guards_properties: emptiness checks over arbitrary collections
"""
