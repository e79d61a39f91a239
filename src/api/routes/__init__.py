"""Rotas HTTP da API: adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (webhook, OAuth, calendário, health)
- Validação inicial de request (headers, query params, corpo)
- Delegação para use cases e serviços
- Envelope de erro `{success: false, error}`

Estrutura:
- routes/auth/: consentimento OAuth2 do Google
- routes/calendar/: eventos do Google Calendar
- routes/vapi/: webhook de chamadas
- routes/health/: liveness

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
