from dataclasses import dataclass


@dataclass(frozen=True)
class AuthenticatedUser:
    id: str
    email: str | None = None
