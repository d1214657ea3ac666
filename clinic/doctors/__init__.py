"""
Doctor registry module.
"""
