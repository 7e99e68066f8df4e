"""
Folio - Interfaces Package
==========================

Contains all user-facing interfaces (presentation layer).

Structure:
- cli/: Operator command-line interface with Rich UI
- types/: Pydantic contract models shared by interfaces
"""
