"""
Domain Layer - entities, value objects, exceptions and ports.

No framework or driver imports live here.
"""
