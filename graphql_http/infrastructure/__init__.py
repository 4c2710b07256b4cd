"""Infrastructure Layer — engine adapter, body decoding, and logging setup.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Failures surface as GraphQLHTTPError subclasses (core/errors.py)
"""
