from typing import Protocol


class AvatarSeedPort(Protocol):
    """Source of fresh avatar seeds - enables deterministic testing."""

    def generate(self) -> str:
        """Return a new avatar seed."""
        ...
