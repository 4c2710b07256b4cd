"""GraphQL HTTP — serves a GraphQL schema over HTTP with an optional GraphiQL fallback.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only (graphql_http.main.create_app,
      graphql_http.api.routes.graphql.graphql_http)
"""
