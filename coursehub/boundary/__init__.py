"""
Boundary layer: relational record store and platform document store adapters.
"""
