"""Intercom messaging: in-app delivery of liveness links."""

from liveness_relay.intercom.messages import IntercomDispatcher

__all__ = ["IntercomDispatcher"]
