"""Connectors por vendor: adapters de borda para webhooks externos.

Estrutura:
- vapi/: webhooks de chamadas de voz

Cada vendor tem seu próprio connector, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
