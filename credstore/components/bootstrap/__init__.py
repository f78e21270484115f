"""Bootstrap component for the default administrator account.

Ensures the admin credential always exists and marks it undeletable.
"""

from .component import ensure_admin_in, is_protected, run_ensure_admin
from .models import BootstrapOutput
from .ports import EncodedStorePort

__all__ = [
    # Entry points
    "run_ensure_admin",
    "ensure_admin_in",
    "is_protected",
    # Models
    "BootstrapOutput",
    # Ports
    "EncodedStorePort",
]
