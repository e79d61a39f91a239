"""Conector Vapi (voice AI)."""
