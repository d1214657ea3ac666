"""
Shared persistence, validation and detail-row helpers.
"""
