from dataclasses import dataclass

from credstore.domain.entities import Profile


@dataclass(frozen=True)
class UpdateBioInput:
    username: str
    bio: str


@dataclass(frozen=True)
class UpdateAvatarSeedInput:
    username: str
    avatar_seed: str


@dataclass(frozen=True)
class ProfileOutput:
    username: str
    profile: Profile
