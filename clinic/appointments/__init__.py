"""
Appointment ledger module.

This module provides:
- Appointment scheduling with patient and doctor checks
- Status, date, time and reason updates
- Date range listings
- The upcoming appointments view
"""
