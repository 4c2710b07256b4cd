"""Services Layer — query orchestration and the interactive renderer.

Invariants:
    - Services talk to the engine only through core/engine_protocols.py
"""
