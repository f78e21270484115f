from .account import AccountOutput, AccountService

__all__ = ["AccountOutput", "AccountService"]
