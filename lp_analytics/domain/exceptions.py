from __future__ import annotations


class DomainError(Exception):
    """Base para erros de dominio."""


class LpStatisticsInputError(DomainError):
    """Parametros invalidos para estatisticas de LP."""


class PoolRankingInputError(DomainError):
    """Parametros invalidos para ranking de pools."""


class TokenSelectionError(DomainError):
    """Acao ou token desconhecido na selecao de tokens."""
