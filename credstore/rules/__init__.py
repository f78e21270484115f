from .loader import load_rules
from .models import (
    DEFAULT_AVATAR_URL_TEMPLATE,
    AdminBootstrapRules,
    AvatarRules,
    RegistrationRules,
    Rules,
    StorageRules,
    StoreKeys,
)

__all__ = [
    "load_rules",
    "DEFAULT_AVATAR_URL_TEMPLATE",
    "AdminBootstrapRules",
    "AvatarRules",
    "RegistrationRules",
    "Rules",
    "StorageRules",
    "StoreKeys",
]
