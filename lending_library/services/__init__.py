"""Lending Library - Services Package

This package contains the facades that wrap store mutations with logging:
- Catalog service (books and search)
- Patron service (patrons and borrowing history)
"""
