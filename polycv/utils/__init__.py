"""
Shared utilities for POLYCV.

Common functionality used across contexts:
- Logger setup
- Text processing
- Timestamps
"""
