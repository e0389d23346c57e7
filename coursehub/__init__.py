"""
coursehub: platform catalog with a denormalized document projection.

Platforms, courses and users live in a relational store; every platform is
also materialized as one PlatformDocument for hierarchical reads.
"""
