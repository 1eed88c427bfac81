from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TokenInput:
    id: str
    symbol: str
    name: str
    amount: str = ""
    selected: bool = False


@dataclass(frozen=True)
class TokenSelectionState:
    tokens: dict[str, TokenInput]
    selected_tokens: tuple[str, ...]
    pair_symbols: tuple[str, str]
    is_weth_selected: bool


@dataclass(frozen=True)
class ToggleToken:
    symbol: str


@dataclass(frozen=True)
class UpdateAmount:
    symbol: str
    amount: str


TokenSelectionAction = ToggleToken | UpdateAmount
