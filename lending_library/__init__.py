"""Lending Library - Core Application Package

This package contains the core application modules including:
- Data models (book.py, patron.py, loan.py)
- In-memory stores (repositories.py)
- Search policies (search.py)
- Lending workflow (lending.py)
- Composition root (library.py)
"""
