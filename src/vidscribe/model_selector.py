"""Model tier selection from estimated prompt size."""

from __future__ import annotations

from vidscribe.config import ModelTier, TierPolicy
from vidscribe.errors import ValidationError


class ModelSelector:
    """Picks the first tier of a policy whose ceiling covers the token estimate."""

    def __init__(self, policy: TierPolicy):
        if not policy.tiers:
            raise ValueError(f"Tier policy for {policy.action!r} has no tiers")
        self.policy = policy

    def select(self, estimated_tokens: int) -> ModelTier:
        """
        Return the tier for a prompt of estimated_tokens tokens.

        Raises:
            ValidationError: if the estimate exceeds every tier's ceiling
        """
        for tier in self.policy.tiers:
            if estimated_tokens <= tier.max_tokens:
                return tier
        raise ValidationError(
            f"Transcript too long to {self.policy.action}. ({estimated_tokens} tokens)"
        )
