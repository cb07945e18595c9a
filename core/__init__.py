"""
Core Storage Module

Foundational data access of the trip calculator.

Components:
- blob_store: Key-value store of JSON documents (SQLite or in-memory),
  optionally encrypted at rest with Fernet

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

__all__ = ['blob_store']
