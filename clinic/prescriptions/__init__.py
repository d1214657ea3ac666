"""
Prescription detail module.

Medications prescribed during an appointment are stored one per row.
"""
