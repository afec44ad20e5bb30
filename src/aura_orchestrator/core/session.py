"""Identity of the signed-in user a session is running for."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SessionUser:
    user_id: str
    email: str
    full_name: str | None = None

    @property
    def display_name(self) -> str:
        """Full name when known, otherwise the email address."""

        if self.full_name and self.full_name.strip():
            return self.full_name.strip()
        return self.email
