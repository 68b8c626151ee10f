# CLI package for objscan
"""
Read-only CLI for inspecting the canonical order of a JSON object.

Commands:
    objscan keys     — Print keys in canonical order
    objscan entries  — Print key/value pairs in canonical order
    objscan count    — Print the number of enumerated entries
"""
