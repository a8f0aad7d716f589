"""Seleção do campo de resposta por precedência fixa de formatos.

A ordem abaixo reflete as versões do webhook: a mais recente responde com
lista de ``output``; as anteriores usam ``data.response``, campos diretos
ou ``message``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Final

from decoder.models.webhook_response import DecodedShape, ShapeKind

# Valores que não selecionam um formato (equivalente a "falsy" no webhook)
_ABSENT: Final[tuple[Any, ...]] = (None, False, "", 0)


def _present(value: Any) -> Any:
    return None if value in _ABSENT else value


def _field(tree: Any, name: str) -> Any:
    return _present(tree.get(name)) if isinstance(tree, dict) else None


def _array_output(tree: Any) -> Any:
    if isinstance(tree, list) and tree:
        return _field(tree[0], "output")
    return None


def _success_envelope(tree: Any) -> Any:
    if isinstance(tree, dict) and tree.get("success") is True:
        return _field(tree.get("data"), "response")
    return None


def _data_response(tree: Any) -> Any:
    return _field(_field(tree, "data"), "response")


SHAPE_PRECEDENCE: Final[tuple[tuple[ShapeKind, Callable[[Any], Any]], ...]] = (
    (ShapeKind.ARRAY_OUTPUT, _array_output),
    (ShapeKind.SUCCESS_ENVELOPE, _success_envelope),
    (ShapeKind.DATA_RESPONSE, _data_response),
    (ShapeKind.DIRECT_OUTPUT, lambda tree: _field(tree, "output")),
    (ShapeKind.DIRECT_RESPONSE, lambda tree: _field(tree, "response")),
    (ShapeKind.DIRECT_MESSAGE, lambda tree: _field(tree, "message")),
)


def resolve_shape(tree: Any) -> DecodedShape | None:
    """Retorna o primeiro formato reconhecido e o valor do seu campo.

    Args:
        tree: Árvore genérica vinda de ``json.loads`` ou de um envelope sintético

    Returns:
        DecodedShape ou None se nenhum formato casar
    """
    for kind, select in SHAPE_PRECEDENCE:
        value = select(tree)
        if value is not None:
            return DecodedShape(kind=kind, value=value)
    return None


def wrap_response(text: str) -> dict[str, Any]:
    """Envelope sintético para texto encontrado no campo ``response``."""
    return {"success": True, "data": {"response": text}}


def wrap_output(text: str) -> list[dict[str, Any]]:
    """Envelope sintético para texto encontrado no campo ``output``."""
    return [{"output": text}]
