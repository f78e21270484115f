"""
Local credential and session store.

Persists accounts, profiles and login state in a device key-value store.
Start with credstore.services.AccountService.
"""

__version__ = "1.0.0"
