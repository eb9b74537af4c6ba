"""CLI command: objkit selector -- build a CSS selector from part tokens."""

from __future__ import annotations

import logging
import sys

import click

from objkit.config import ObjkitConfig
from objkit.selector import (
    COMBINATORS,
    PartKind,
    SelectorBuilder,
    SelectorError,
    SelectorState,
)

logger = logging.getLogger(__name__)

# Token prefix -> part kind.
_TOKEN_KINDS: dict[str, PartKind] = {
    "element": PartKind.ELEMENT,
    "id": PartKind.ID,
    "class": PartKind.CLASS,
    "attr": PartKind.ATTRIBUTE,
    "pseudo-class": PartKind.PSEUDO_CLASS,
    "pseudo-element": PartKind.PSEUDO_ELEMENT,
}

# Combinator tokens; "descendant" stands in for the whitespace combinator.
_COMBINATOR_TOKENS: dict[str, str] = {c: c for c in COMBINATORS if c.strip()}
_COMBINATOR_TOKENS["descendant"] = " "


def _split_token(token: str) -> tuple[PartKind, str]:
    kind_name, sep, value = token.partition("=")
    if not sep or kind_name not in _TOKEN_KINDS:
        raise click.BadParameter(
            f"expected KIND=VALUE with KIND one of {', '.join(_TOKEN_KINDS)}; got {token!r}",
            param_hint="TOKENS",
        )
    return _TOKEN_KINDS[kind_name], value


def build_selector(builder: SelectorBuilder, tokens: tuple[str, ...]) -> SelectorState:
    """Apply *tokens* in order, combining compounds around combinator tokens.

    Compounds are combined right-nested: ``a + b ~ c`` becomes
    ``combine(a, "+", combine(b, "~", c))``.
    """
    compounds: list[SelectorState] = []
    combinators: list[str] = []
    current: SelectorState | None = None

    for token in tokens:
        if token in _COMBINATOR_TOKENS:
            if current is None:
                raise click.BadParameter(
                    f"combinator {token!r} needs a selector on its left",
                    param_hint="TOKENS",
                )
            compounds.append(current)
            combinators.append(_COMBINATOR_TOKENS[token])
            current = None
            continue
        kind, value = _split_token(token)
        current = (current or builder.empty()).append(kind, value)

    if current is None:
        raise click.BadParameter("selector must not end with a combinator", param_hint="TOKENS")

    result = current
    for left, combinator in zip(reversed(compounds), reversed(combinators)):
        result = builder.combine(left, combinator, result)
    return result


@click.command(name="selector")
@click.argument("tokens", nargs=-1, required=True)
@click.pass_obj
def selector_command(config: ObjkitConfig | None, tokens: tuple[str, ...]) -> None:
    """Build a CSS selector from TOKENS and print it.

    Each token is KIND=VALUE (element, id, class, attr, pseudo-class,
    pseudo-element) or a combinator: +, ~, > or descendant.

    \b
    Example:
        objkit selector element=a 'attr=href$=".png"' pseudo-class=focus
    """
    config = config or ObjkitConfig()
    builder = SelectorBuilder(strict=config.strict_selectors)
    try:
        state = build_selector(builder, tokens)
    except SelectorError as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)
    logger.debug("Built selector from %d token(s)", len(tokens))
    click.echo(state.stringify())
