"""API: camada de borda e adapters de vendors.

Responsabilidades:
- Receber requests externos (webhook, OAuth callback, calendário)
- Validar payloads
- Normalizar dados para modelos internos

Subpastas:
- connectors/: parse de entrada por vendor
- normalizers/: conversão de payloads externos para modelos internos
- routes/: endpoints HTTP

NÃO PODE conter: orquestração de use cases nem IO com provedores.
"""
