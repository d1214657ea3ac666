"""
Medical history module.
"""
