"""Expiry and deadline alerting for tow-fleet records."""
