"""Rotas de calendário."""
