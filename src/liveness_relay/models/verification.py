"""Verification link returned by the identity-verification service."""

from pydantic import BaseModel


class VerificationLink(BaseModel):
    """A Sumsub WebSDK link. Expiry is enforced by Sumsub, not tracked here."""

    url: str
    external_player_id: str
    ttl_seconds: int
