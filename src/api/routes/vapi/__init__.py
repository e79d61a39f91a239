"""Rotas do webhook Vapi."""
