"""
ATM Withdrawal - minimum note breakdown service.

Computes the fewest notes needed to dispense a cash amount and exposes
the calculation over HTTP, with a typed client and a form-based UI.
"""

__version__ = "1.0.0"
