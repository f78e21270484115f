from typing import Literal
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict

from credstore.rules.models import DEFAULT_AVATAR_URL_TEMPLATE

StartRoute = Literal["onboarding", "login", "home"]


# --- Profile ---

class Profile(BaseModel):
    """Per-user extra fields. Stored as {"bio": ..., "avatarSeed": ...}."""

    bio: str = ""
    avatar_seed: str

    @classmethod
    def default_for(cls, username: str) -> "Profile":
        return cls(bio="", avatar_seed=username)


# --- Composite view ---

class UserView(BaseModel):
    """Read-only merge of credential, profile and the derived admin flag."""

    model_config = ConfigDict(frozen=True)

    username: str
    password: str
    bio: str = ""
    avatar_seed: str
    is_admin: bool = False
    avatar_url: str

    @staticmethod
    def build_avatar_url(seed: str, template: str = DEFAULT_AVATAR_URL_TEMPLATE) -> str:
        return template.format(seed=quote(seed, safe=""))
