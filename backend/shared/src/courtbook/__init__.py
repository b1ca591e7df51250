"""Courtbook payment and policy resolver.

Pure computations behind the court booking payment page: deposit and fee
breakdowns, payment options, pending debts, booking windows and
cancellation refunds.
"""

__version__ = "0.1.0"
