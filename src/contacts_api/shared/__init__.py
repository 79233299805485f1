"""
Shared infrastructure: database access, logging and domain exceptions.
"""
