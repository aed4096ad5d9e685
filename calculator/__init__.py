"""Calculator Microservice - arithmetic over HTTP query strings.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
