"""CLI command: cssbuilder build -- render a selector from ordered parts."""

from __future__ import annotations

import sys

import click

from cssbuilder.selector import Part, SelectorBuilder, SelectorError, css_selector_builder

_KINDS: dict[str, Part] = {
    "element": Part.ELEMENT,
    "id": Part.ID,
    "class": Part.CLASS,
    "attr": Part.ATTRIBUTE,
    "pseudo-class": Part.PSEUDO_CLASS,
    "pseudo-element": Part.PSEUDO_ELEMENT,
}


def build_selector(tokens: tuple[str, ...] | list[str]) -> SelectorBuilder:
    """Turn ``kind=value`` tokens and combinator tokens into a selector.

    Any token without ``=`` is a combinator joining the selector built so far
    with the one that follows it.
    """
    result: SelectorBuilder | None = None
    current: SelectorBuilder | None = None
    pending: str | None = None

    for token in tokens:
        if "=" not in token:
            if current is None:
                raise click.UsageError(f"Combinator {token!r} has no selector before it")
            result = _join(result, pending, current)
            current, pending = None, token
            continue
        kind, value = token.split("=", 1)
        part = _KINDS.get(kind.strip().lower())
        if part is None:
            raise click.UsageError(f"Unknown selector part {kind!r} in {token!r}")
        current = (current or SelectorBuilder()).add(part, value)

    if current is None:
        if pending is not None:
            raise click.UsageError(f"Combinator {pending!r} has no selector after it")
        raise click.UsageError("No selector parts given")
    return _join(result, pending, current)


def _join(
    left: SelectorBuilder | None, combinator: str | None, right: SelectorBuilder
) -> SelectorBuilder:
    if left is None or combinator is None:
        return right
    return css_selector_builder.combine(left, combinator, right)


@click.command()
@click.argument("tokens", nargs=-1, required=True)
def build(tokens: tuple[str, ...]) -> None:
    """Build a selector from KIND=VALUE parts and combinators.

    KIND is one of element, id, class, attr, pseudo-class, pseudo-element.
    Any other token (for example '>', '+', '~' or ' ') is a combinator.

        cssbuilder build element=a 'attr=href$=".png"' pseudo-class=focus
    """
    try:
        selector = build_selector(tokens)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(selector.stringify())
