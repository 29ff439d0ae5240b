"""
Property-based tests for the FR decode table.

Hypothesis draws instruction words and overlay option sets; example counts
come from ``FR80_PROP_EXAMPLES``.
"""
