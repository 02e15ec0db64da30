"""
Services package - Application logic around the domain engine.
"""

from .withdrawal import WithdrawalService, get_withdrawal_service

__all__ = ["WithdrawalService", "get_withdrawal_service"]
