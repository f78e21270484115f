from typing import Literal

from pydantic import BaseModel, Field

DEFAULT_AVATAR_URL_TEMPLATE = "https://api.dicebear.com/7.x/adventurer/svg?seed={seed}"


class StorageRules(BaseModel):
    backend: Literal["sqlite", "memory"] = "sqlite"
    db_path: str = "credstore.db"
    namespace: str = "RhythmHubPreferences"


class StoreKeys(BaseModel):
    credentials: str = "users_json"
    profiles: str = "user_profiles_json"
    current_user: str = "current_user"
    remember_me: str = "remember_me"
    first_launch: str = "is_first_launch"
    legacy_username: str = "username"
    legacy_password: str = "password"


class AdminBootstrapRules(BaseModel):
    username: str = Field(default="admin", min_length=1)
    password: str = Field(default="admin", min_length=1)


class RegistrationRules(BaseModel):
    password_min_length: int = Field(default=4, ge=1)


class AvatarRules(BaseModel):
    url_template: str = DEFAULT_AVATAR_URL_TEMPLATE
    seed_length: int = Field(default=12, ge=4, le=64)


class Rules(BaseModel):
    storage: StorageRules = Field(default_factory=StorageRules)
    keys: StoreKeys = Field(default_factory=StoreKeys)
    bootstrap_admin: AdminBootstrapRules = Field(default_factory=AdminBootstrapRules)
    registration: RegistrationRules = Field(default_factory=RegistrationRules)
    avatar: AvatarRules = Field(default_factory=AvatarRules)
