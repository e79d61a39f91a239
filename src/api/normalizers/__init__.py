"""Normalizers por vendor: conversão de payloads externos para modelos internos.

Cada vendor tem seu próprio extractor (formato bruto) e normalizer
(regras de decisão), mantendo SRP.
"""

from .vapi import SkippedDelivery, normalize

__all__ = [
    "SkippedDelivery",
    "normalize",
]
