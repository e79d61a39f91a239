"""App: orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: modelos canônicos (CallEvent, TokenRecord, entrada de evento)
- use_cases/: casos de uso (sem IO direto)
- services/: serviços de aplicação
- infra/: implementações concretas de IO
- protocols/: contratos/interfaces
- observability/: correlation_id por requisição

Padrão: app executa; api adapta; config configura; utils apoia.
"""
