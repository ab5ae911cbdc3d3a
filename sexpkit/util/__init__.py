"""
Utilities shared across the reader.
"""
