# tests/integration/ - Process-level integration tests
"""
Integration tests that run the launcher scripts as real processes
against throwaway project trees.
"""
