"""API Layer — the GraphQL route and global error handlers.

Invariants:
    - Routes registered explicitly by create_app (no auto-discovery)
    - Every response body is the {"data"?, "errors"?} envelope or GraphiQL markup
"""
