"""
Patient registry module.

Provides patient registration, updates, restricted deletion and age calculation.
"""
