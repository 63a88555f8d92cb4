"""
Reference Catalogs
==================
Hand-authored reference data for the consulting dashboard.

Each module holds plain dicts and lists; engines and UI components read
them directly and never mutate them.
"""
