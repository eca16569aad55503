"""Hypothesis strategies for lprojmatch property-based testing.

Usage:
    from tests.strategies.templates import literal_text, template_with_args
"""
