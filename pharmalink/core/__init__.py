"""
Core building blocks shared by every domain: application assembly,
domain base classes, logging and infrastructure helpers.
"""
