"""Cliente HTTP base para o webhook de chat."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    max_retries: int = 0
    backoff_base_seconds: float = 2.0
    backoff_max_seconds: float = 30.0
    default_headers: dict[str, str] = field(
        default_factory=lambda: {"Content-Type": "application/json"}
    )
    verify_ssl: bool = True
    transport: httpx.AsyncBaseTransport | None = None


class HttpError(Exception):
    """Erro de requisição HTTP sem dados sensíveis."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        is_retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.is_retryable = is_retryable


class HttpClient:
    """Cliente HTTP com retry/backoff para 429, 5xx e falhas de transporte.

    Toda falha de transporte do httpx (timeout, conexão, leitura, protocolo)
    sai como HttpError.
    """

    def __init__(self, config: HttpClientConfig | None = None) -> None:
        self._config = config or HttpClientConfig()

    async def post(
        self,
        url: str,
        json: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        merged_headers = {**self._config.default_headers, **(headers or {})}
        for attempt in range(self._config.max_retries + 1):
            try:
                async with httpx.AsyncClient(
                    verify=self._config.verify_ssl,
                    transport=self._config.transport,
                ) as client:
                    response = await client.post(
                        url,
                        json=json,
                        headers=merged_headers,
                        timeout=self._config.timeout_seconds,
                    )
                if response.status_code == 429 or response.status_code >= 500:
                    raise HttpError(
                        _status_message(response),
                        status_code=response.status_code,
                        is_retryable=True,
                    )
                return response
            except HttpError as exc:
                if not exc.is_retryable or attempt >= self._config.max_retries:
                    raise
                await _backoff_sleep(
                    attempt,
                    self._config.backoff_base_seconds,
                    self._config.backoff_max_seconds,
                )
            except httpx.TransportError as exc:
                if attempt >= self._config.max_retries:
                    raise HttpError("Erro de conexão com o servidor", is_retryable=True) from exc
                await _backoff_sleep(
                    attempt,
                    self._config.backoff_base_seconds,
                    self._config.backoff_max_seconds,
                )
        raise HttpError("http_retry_exhausted", is_retryable=True)


def _status_message(response: httpx.Response) -> str:
    return f"Erro HTTP: {response.status_code} - {response.reason_phrase}"


def raise_for_status(response: httpx.Response) -> None:
    """Levanta HttpError para respostas fora de 2xx."""
    if not response.is_success:
        raise HttpError(_status_message(response), status_code=response.status_code)


async def _backoff_sleep(attempt: int, base: float, max_seconds: float) -> None:
    backoff = min((2**attempt) * base, max_seconds)
    logger.info("http_backoff", extra={"backoff_seconds": backoff})
    await asyncio.sleep(backoff)
