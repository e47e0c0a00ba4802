"""
Infrastructure Layer

Storage implementations for the domain repository interfaces.
"""
