"""Sumsub identity verification: liveness link creation."""

from liveness_relay.sumsub.links import SumsubLinkProvider

__all__ = ["SumsubLinkProvider"]
