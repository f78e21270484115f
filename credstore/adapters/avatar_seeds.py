"""Avatar seed adapters implementing AvatarSeedPort."""

import secrets


class RandomAvatarSeeds:
    """Random hex seeds from the system CSPRNG."""

    def __init__(self, length: int = 12) -> None:
        self.length = length

    def generate(self) -> str:
        # token_hex yields two characters per byte
        return secrets.token_hex((self.length + 1) // 2)[: self.length]


class FixedAvatarSeeds:
    """Deterministic seeds for testing: seed-1, seed-2, ..."""

    def __init__(self, prefix: str = "seed") -> None:
        self.prefix = prefix
        self._counter = 0

    def generate(self) -> str:
        self._counter += 1
        return f"{self.prefix}-{self._counter}"
