from dataclasses import dataclass


@dataclass(frozen=True)
class Controller:
    """Opaque controller id. Never equal to an Action with the same text."""
    id: str

    def __str__(self) -> str:
        return self.id


@dataclass(frozen=True)
class Action:
    """Opaque control action id."""
    id: str

    def __str__(self) -> str:
        return self.id
