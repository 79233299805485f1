"""
Contacts API: a small CRUD service over contact records.
"""

__version__ = "1.0.0"
