"""
Profile component - optional per-user fields and the composite user view.
"""

from .component import (
    run_get_profile,
    run_get_user,
    run_update_avatar_seed,
    run_update_bio,
)
from .models import ProfileOutput, UpdateAvatarSeedInput, UpdateBioInput
from .ports import EncodedStorePort

__all__ = [
    # Entry points
    "run_get_profile",
    "run_get_user",
    "run_update_avatar_seed",
    "run_update_bio",
    # Models
    "ProfileOutput",
    "UpdateAvatarSeedInput",
    "UpdateBioInput",
    # Ports
    "EncodedStorePort",
]
