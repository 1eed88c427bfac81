from __future__ import annotations

from dataclasses import replace

from lp_analytics.domain.entities.token_selection import (
    ToggleToken,
    TokenInput,
    TokenSelectionAction,
    TokenSelectionState,
    UpdateAmount,
)
from lp_analytics.domain.exceptions import TokenSelectionError


ETH_ID = "0xEeeeeEeeeEeEeeEeEeEeeEEEeeeeEeeeeeeeEEeE"
ETH_SYMBOL = "ETH"
WETH_SYMBOL = "WETH"


def initial_token_selection(token0: TokenInput, token1: TokenInput) -> TokenSelectionState:
    tokens = {
        token0.symbol: replace(token0, amount="", selected=True),
        token1.symbol: replace(token1, amount="", selected=True),
        ETH_SYMBOL: TokenInput(id=ETH_ID, symbol=ETH_SYMBOL, name="Ethereum"),
    }
    return TokenSelectionState(
        tokens=tokens,
        selected_tokens=(token0.symbol, token1.symbol),
        pair_symbols=(token0.symbol, token1.symbol),
        is_weth_selected=WETH_SYMBOL in (token0.symbol, token1.symbol),
    )


def reduce_token_selection(
    state: TokenSelectionState,
    action: TokenSelectionAction,
) -> TokenSelectionState:
    if isinstance(action, ToggleToken):
        return _toggle(state, action.symbol)
    if isinstance(action, UpdateAmount):
        token = _get_token(state, action.symbol)
        return replace(
            state,
            tokens={**state.tokens, action.symbol: replace(token, amount=action.amount)},
        )
    raise TokenSelectionError(f"Unknown token selection action: {type(action).__name__}.")


def _toggle(state: TokenSelectionState, symbol: str) -> TokenSelectionState:
    token = _get_token(state, symbol)
    if token.selected:
        selected = [value for value in state.selected_tokens if value != symbol]
    else:
        selected = [*state.selected_tokens, symbol]

    # Selected symbols always follow the pair order; ETH takes the WETH slot.
    ordered: list[str] = []
    for pair_symbol in state.pair_symbols:
        if pair_symbol in selected:
            ordered.append(pair_symbol)
        elif pair_symbol == WETH_SYMBOL and ETH_SYMBOL in selected:
            ordered.append(ETH_SYMBOL)

    return replace(
        state,
        selected_tokens=tuple(ordered),
        tokens={**state.tokens, symbol: replace(token, selected=not token.selected)},
    )


def _get_token(state: TokenSelectionState, symbol: str) -> TokenInput:
    token = state.tokens.get(symbol)
    if token is None:
        raise TokenSelectionError(f"Unknown token symbol: {symbol}.")
    return token
