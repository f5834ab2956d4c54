"""CLI command: selectorkit render -- build a selector from KIND=VALUE tokens."""

from __future__ import annotations

import sys

import click

from selectorkit.errors import SelectorError
from selectorkit.selector import FragmentKind, Selector

_KINDS: dict[str, FragmentKind] = {
    "element": FragmentKind.ELEMENT,
    "id": FragmentKind.ID,
    "class": FragmentKind.CLASS,
    "attr": FragmentKind.ATTRIBUTE,
    "attribute": FragmentKind.ATTRIBUTE,
    "pseudo-class": FragmentKind.PSEUDO_CLASS,
    "pseudo-element": FragmentKind.PSEUDO_ELEMENT,
}


def _parse_fragments(
    ctx: click.Context, param: click.Parameter, values: tuple[str, ...]
) -> list[tuple[FragmentKind, str]]:
    fragments: list[tuple[FragmentKind, str]] = []
    for token in values:
        kind_name, sep, value = token.partition("=")
        if not sep:
            raise click.BadParameter(f"expected KIND=VALUE, got {token!r}", ctx, param)
        kind = _KINDS.get(kind_name.strip().lower())
        if kind is None:
            choices = ", ".join(_KINDS)
            raise click.BadParameter(
                f"unknown fragment kind {kind_name!r} (choose from {choices})", ctx, param
            )
        fragments.append((kind, value))
    return fragments


@click.command()
@click.argument("fragments", nargs=-1, required=True, callback=_parse_fragments)
def render(fragments: list[tuple[FragmentKind, str]]) -> None:
    """Build a selector from FRAGMENTS and print it.

    Fragments are KIND=VALUE tokens applied in the order given, e.g.

        selectorkit render element=a 'attr=href$=".png"' pseudo-class=focus
    """
    selector = Selector()
    try:
        for kind, value in fragments:
            selector.add(kind, value)
    except SelectorError as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)

    click.echo(selector.render())
