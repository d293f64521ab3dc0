"""CLI command: selectorkit build -- compose a selector from part tokens."""

from __future__ import annotations

import sys

import click

from selectorkit.errors import SelectorRuleViolation
from selectorkit.selector import PartKind, Selector, css_selector_builder

# Combinator tokens accepted on the command line; ``descendant`` spells ' '.
_COMBINATORS: dict[str, str] = {
    "+": "+",
    "~": "~",
    ">": ">",
    "descendant": " ",
}


def _parse_part(token: str) -> tuple[PartKind, str]:
    kind_name, sep, value = token.partition("=")
    if not sep:
        raise click.BadParameter(
            f"expected KIND=VALUE or a combinator, got {token!r}", param_hint="TOKENS"
        )
    try:
        kind = PartKind(kind_name.strip().lower())
    except ValueError:
        choices = ", ".join(k.value for k in PartKind)
        raise click.BadParameter(
            f"unknown part kind {kind_name!r} (choose from {choices})",
            param_hint="TOKENS",
        ) from None
    return kind, value


def _split(tokens: tuple[str, ...]) -> tuple[list[list[tuple[PartKind, str]]], list[str]]:
    """Split tokens into compound part lists and the combinators between them."""
    compounds: list[list[tuple[PartKind, str]]] = [[]]
    combinators: list[str] = []
    for token in tokens:
        if token in _COMBINATORS:
            if not compounds[-1]:
                raise click.BadParameter(
                    f"combinator {token!r} must follow a selector", param_hint="TOKENS"
                )
            combinators.append(_COMBINATORS[token])
            compounds.append([])
        else:
            compounds[-1].append(_parse_part(token))
    if not compounds[-1]:
        raise click.BadParameter("selector must not end with a combinator", param_hint="TOKENS")
    return compounds, combinators


def compose(tokens: tuple[str, ...]) -> Selector:
    """Build a Selector from CLI tokens, combining compounds left to right."""
    compounds, combinators = _split(tokens)

    selectors: list[Selector] = []
    for parts in compounds:
        (first_kind, first_value), *rest = parts
        selector = css_selector_builder.part(first_kind, first_value)
        for kind, value in rest:
            selector.append(kind, value)
        selectors.append(selector)

    result = selectors[0]
    for combinator, right in zip(combinators, selectors[1:]):
        result = css_selector_builder.combine(result, combinator, right)
    return result


@click.command()
@click.argument("tokens", nargs=-1, required=True)
def build(tokens: tuple[str, ...]) -> None:
    """Compose a CSS selector from KIND=VALUE parts and combinators.

    KIND is one of element, id, class, attr, pseudo-class, pseudo-element.
    Combinators are +, ~, > and "descendant".

    Example: selectorkit build element=div id=main + element=span
    """
    try:
        selector = compose(tokens)
    except SelectorRuleViolation as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(selector.stringify())
