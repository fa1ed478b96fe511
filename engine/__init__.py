"""engine

Headless game flow on top of core. UI-agnostic.
"""
