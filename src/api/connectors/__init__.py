"""Connectors: adapters de borda para APIs externas.

Estrutura:
- webhook/: webhook de chat do assistente criador de conteúdo
"""

__all__: list[str] = []
