# -*- coding: utf-8 -*-
"""
qorinti/modules/billing/triggers/registry.py

Registro de handlers reactivos por ruta de documento.

Cada handler se registra para una ruta de colección con comodines de un
segmento (p. ej. `payments/{paymentId}`) y recibe el almacén, el evento
y los parámetros extraídos de la ruta.

`dispatch` ejecuta todos los handlers que coinciden con la ruta del
documento de forma independiente: el fallo de uno no impide que corran
los demás. Si alguno falló, se lanza `TriggerDispatchError` al final
para que la plataforma reintente la entrega (los handlers son
idempotentes).

Autor: Qorinti
Fecha: 2026-10-07
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from time import perf_counter
from typing import Awaitable, Callable, Dict, List, Optional, Pattern, Tuple

from qorinti.shared.firestore.store import DocumentStore
from qorinti.modules.billing.enums import HandlerOutcome
from qorinti.modules.billing.metrics.exporters.prometheus_exporter import observe_trigger_outcome
from qorinti.modules.billing.schemas import DocumentCreatedEvent, HandlerResult

logger = logging.getLogger(__name__)

TriggerHandler = Callable[
    [DocumentStore, DocumentCreatedEvent, Dict[str, str]],
    Awaitable[HandlerResult],
]

_WILDCARD = re.compile(r"^\{([A-Za-z_][A-Za-z0-9_]*)\}$")


class TriggerDispatchError(Exception):
    """Uno o más handlers fallaron al procesar el evento."""

    def __init__(self, document_path: str, failures: Dict[str, BaseException], results: List[HandlerResult]):
        self.document_path = document_path
        self.failures = failures
        self.results = results
        names = ", ".join(sorted(failures))
        super().__init__(f"Fallaron handlers para {document_path}: {names}")


def compile_document_pattern(pattern: str) -> Pattern[str]:
    """
    Compila `coleccion/{param}` a una regex con grupos nombrados.

    Examples:
        >>> compile_document_pattern("payments/{paymentId}").match("payments/p1").groupdict()
        {'paymentId': 'p1'}
    """
    segments = pattern.strip("/").split("/")
    if not pattern.strip("/") or len(segments) % 2 != 0:
        raise ValueError(f"La ruta debe apuntar a un documento: {pattern!r}")

    parts = []
    seen = set()
    for segment in segments:
        wildcard = _WILDCARD.match(segment)
        if wildcard:
            name = wildcard.group(1)
            if name in seen:
                raise ValueError(f"Parámetro repetido en la ruta: {name}")
            seen.add(name)
            parts.append(f"(?P<{name}>[^/]+)")
        elif "{" in segment or "}" in segment:
            raise ValueError(f"Segmento inválido en la ruta: {segment!r}")
        else:
            parts.append(re.escape(segment))
    return re.compile("^" + "/".join(parts) + "$")


@dataclass(frozen=True)
class TriggerBinding:
    pattern: str
    name: str
    handler: TriggerHandler
    regex: Pattern[str] = field(repr=False, compare=False)

    def match(self, document_path: str) -> Optional[Dict[str, str]]:
        m = self.regex.match(document_path.strip("/"))
        return m.groupdict() if m else None


class TriggerRegistry:
    """Registro de handlers "documento creado"."""

    def __init__(self) -> None:
        self._bindings: List[TriggerBinding] = []

    @property
    def bindings(self) -> List[TriggerBinding]:
        return list(self._bindings)

    def register(self, pattern: str, handler: TriggerHandler, *, name: Optional[str] = None) -> TriggerBinding:
        binding = TriggerBinding(
            pattern=pattern,
            name=name or handler.__name__,
            handler=handler,
            regex=compile_document_pattern(pattern),
        )
        if any(b.name == binding.name for b in self._bindings):
            raise ValueError(f"Handler ya registrado: {binding.name}")
        self._bindings.append(binding)
        logger.debug("Trigger registrado: %s → %s", pattern, binding.name)
        return binding

    def on_document_created(self, pattern: str, *, name: Optional[str] = None):
        """Decorador: registra el handler para documentos creados en `pattern`."""

        def decorator(fn: TriggerHandler) -> TriggerHandler:
            self.register(pattern, fn, name=name)
            return fn

        return decorator

    def match(self, document_path: str) -> List[Tuple[TriggerBinding, Dict[str, str]]]:
        matches = []
        for binding in self._bindings:
            params = binding.match(document_path)
            if params is not None:
                matches.append((binding, params))
        return matches

    async def dispatch(self, store: DocumentStore, event: DocumentCreatedEvent) -> List[HandlerResult]:
        """
        Ejecuta los handlers que coinciden con `event.document_path`.

        Raises:
            TriggerDispatchError: si al menos un handler lanzó excepción
                (tras ejecutar todos los demás).
        """
        matches = self.match(event.document_path)
        if not matches:
            logger.info("Sin handlers para %s (event_id=%s)", event.document_path, event.event_id)
            return []

        results: List[HandlerResult] = []
        failures: Dict[str, BaseException] = {}

        for binding, params in matches:
            start = perf_counter()
            try:
                result = await binding.handler(store, event, params)
            except Exception as e:
                elapsed = perf_counter() - start
                observe_trigger_outcome(binding.name, "error", elapsed)
                logger.exception(
                    "❌ Handler %s falló: path=%s, event_id=%s",
                    binding.name,
                    event.document_path,
                    event.event_id,
                )
                failures[binding.name] = e
                continue

            elapsed = perf_counter() - start
            outcome = HandlerOutcome(result.outcome)
            observe_trigger_outcome(binding.name, outcome.value, elapsed, result.reason)
            if outcome == HandlerOutcome.SKIPPED:
                logger.info(
                    "⏭️ %s omitido: path=%s, reason=%s",
                    binding.name,
                    event.document_path,
                    result.reason,
                )
            results.append(result)

        if failures:
            raise TriggerDispatchError(event.document_path, failures, results)
        return results


__all__ = [
    "TriggerHandler",
    "TriggerDispatchError",
    "TriggerBinding",
    "TriggerRegistry",
    "compile_document_pattern",
]

# Fin del archivo qorinti/modules/billing/triggers/registry.py
