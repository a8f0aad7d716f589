"""API: adapters de borda para serviços externos.

Subpastas:
- connectors/: clientes HTTP por serviço externo

NÃO PODE conter: estado de conversa nem interpretação de respostas.
"""
