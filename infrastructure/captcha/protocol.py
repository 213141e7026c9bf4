"""CaptchaVerifier protocol — the contact service depends on this, not the concrete implementation."""

from typing import Protocol


class CaptchaVerifier(Protocol):
    async def verify(self, token: str) -> bool:
        """Return whether *token* is accepted.

        Raises errors.CaptchaConnectionError when no verdict could be
        obtained, and errors.InvalidArgumentError when *token* is not a str.
        """
        ...
