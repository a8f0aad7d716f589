"""App: orquestração do chat do criador de conteúdo.

Subpastas:
- bootstrap/: composition root (logging, settings, wiring)
- use_cases/: turno de chat (conversa, status, bolhas de erro)
- protocols/: contratos usados pelos use cases
- observability/: correlation_id para logs estruturados

Padrão: app executa; api adapta; decoder interpreta; utils apoia.
"""
