"""JobHorizon Application Package — job listing and application API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
