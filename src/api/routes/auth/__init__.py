"""Rotas de autenticação OAuth2."""
