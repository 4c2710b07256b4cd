"""Route Modules — one file per endpoint.

Invariants:
    - Routes never contain GraphQL logic (delegate to core/ and services/)
"""
