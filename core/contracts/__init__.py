"""core.contracts

Stable interfaces (ABCs) shared between the application shell and features.

This package intentionally contains only interfaces.
"""
