"""
Ledger Service

Customer accounts with credit/debit statements, running balances and
calendar-day statement queries, served over HTTP.
"""

__version__ = "1.0.0"
