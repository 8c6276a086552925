"""Caller identification and spam likelihood lookup API."""
