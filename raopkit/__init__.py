"""Helpers for AirPlay audio receivers: RTP clock sync, settings and FairPlay garbling."""

__version__ = "0.1.0"