"""
Command-line interface for nuclidetable.

Usage:
    nuclidetable element Fe            # Iron at a glance
    nuclidetable isotopes U            # Uranium isotopes and decay products
    nuclidetable table --lang de       # Fixed-width listing in German
    nuclidetable json > elements.json  # Whole catalog as JSON
    nuclidetable longtable             # 32-column periodic table
    nuclidetable export -o nuclides.csv
"""

from __future__ import annotations

import json
import sys

import click

from . import __version__
from .catalog import get_catalog
from .config import Config, setup_logging
from .exceptions import NuclideOutOfRangeError
from .formatters import format_fixed_width, format_html_cells, format_json
from .nuclide import Nuclide
from .terms import ISOTOPE_HEADINGS, localize

__all__ = [
    "cli",
    "main",
]


def resolve_nuclide(key: str) -> Nuclide:
    """
    Find a nuclide by symbol or atomic number, exiting with an error if absent.

    Example:
        >>> resolve_nuclide("Fe").z
        26
        >>> resolve_nuclide("92").symbol
        'U'
    """
    catalog = get_catalog()
    if key.isdigit():
        try:
            return catalog[int(key)]
        except NuclideOutOfRangeError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

    nuclide = catalog.get_by_symbol(key)
    if nuclide is None:
        click.echo(f"Error: Unknown element symbol {key!r}", err=True)
        sys.exit(1)
    return nuclide


def format_kelvin(value: float | None) -> str:
    """
    Format a temperature, or "unknown".

    Example:
        >>> format_kelvin(1811.0)
        '1811.000 K (1537.85 °C)'
    """
    if value is None:
        return "unknown"
    return f"{value:.3f} K ({value - Config.STANDARD_TEMPERATURE:.2f} °C)"


@click.group()
@click.version_option(version=__version__, prog_name="nuclidetable")
@click.option("--verbose", "-v", is_flag=True, help="Log catalog activity to stderr")
def cli(verbose: bool):
    """
    Nuclide Table - Elements, isotopes and decay modes.

    Examples:

        nuclidetable element W           # Tungsten

        nuclidetable isotopes 92         # Uranium isotopes

        nuclidetable longtable           # Long-form periodic table

        nuclidetable json --js           # Catalog as JavaScript
    """
    if verbose:
        setup_logging("DEBUG")


@cli.command()
@click.argument("key")
@click.option("--lang", "-l", default=None, help="Language code for names (e.g. de, en-US)")
@click.option("--kelvin", "-k", type=float, default=None, help="Report the state at this temperature")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def element(key: str, lang: str | None, kelvin: float | None, output_json: bool):
    """
    Show one element by symbol or atomic number.

    Examples:

        nuclidetable element Fe

        nuclidetable element 80 --kelvin 300

        nuclidetable element Al --lang en-US --json
    """
    lang = lang or Config.DEFAULT_LANGUAGE
    nuclide = resolve_nuclide(key)

    if output_json:
        data = nuclide.to_dict(lang)
        if kelvin is not None:
            data["state_at_T"] = nuclide.get_state(kelvin).get_name(lang)
        click.echo(json.dumps(data, indent=2, ensure_ascii=False))
        return

    click.echo(f"\n{nuclide.get_name(lang)} ({nuclide.symbol})")
    click.echo("=" * 50)

    click.echo(f"\n  Atomic number (Z):  {nuclide.z}")
    click.echo(f"  Atomic weight:      {nuclide.weight:.4f}")
    click.echo(f"  Period / group:     {nuclide.period} / {nuclide.group or '-'}")
    click.echo(f"  Block:              {nuclide.block}")
    click.echo(f"  Category:           {nuclide.category.get_name(lang)}")

    click.echo(f"\n  Melting point:      {format_kelvin(nuclide.melt)}")
    click.echo(f"  Boiling point:      {format_kelvin(nuclide.boil)}")
    click.echo(f"  State at 0 °C:      {nuclide.state_at_0c.get_name(lang)}")
    if kelvin is not None:
        click.echo(f"  State at {kelvin:g} K:{'':<{max(1, 9 - len(f'{kelvin:g}'))}}"
                   f"{nuclide.get_state(kelvin).get_name(lang)}")

    click.echo(f"\n  Occurrence:         {nuclide.occurrence.get_name(lang)}")
    click.echo(f"  Stability:          {nuclide.get_stability_description(lang)}")
    click.echo(f"  Isotopes:           {len(nuclide.isotopes)} ({nuclide.stable_count} stable)")
    click.echo(f"  Biology:            {nuclide.life.get_description(lang)}")

    if nuclide.known:
        click.echo(f"\n  Discovered:         {nuclide.known}")
    else:
        click.echo("\n  Discovered:         prehistoric")
    if nuclide.credit:
        click.echo(f"  Credited to:        {nuclide.credit}")
    if nuclide.naming:
        click.echo(f"  Name origin:        {nuclide.naming}")
    click.echo()


@cli.command()
@click.argument("key")
@click.option("--lang", "-l", default=None, help="Language code for halflife text")
@click.option("--format", "fmt", type=click.Choice(["table", "csv", "json"]),
              default="table", help="Output format")
def isotopes(key: str, lang: str | None, fmt: str):
    """
    List the isotopes of an element with their decay products.

    Examples:

        nuclidetable isotopes U

        nuclidetable isotopes 6 --format csv

        nuclidetable isotopes Rn --lang fr
    """
    lang = lang or Config.DEFAULT_LANGUAGE
    nuclide = resolve_nuclide(key)

    df = get_catalog().isotopes_dataframe(lang, include_neutron=True)
    df = df[df["Z"] == nuclide.z]

    if fmt == "csv":
        click.echo(df.to_csv(index=False))
        return
    if fmt == "json":
        click.echo(df.to_json(orient="records", indent=2, force_ascii=False))
        return

    click.echo(f"\n{nuclide.symbol} isotopes (Z={nuclide.z}): {len(df)} found\n")
    headings = localize(ISOTOPE_HEADINGS, lang)
    df_display = df[["A", "abundance", "halflife", "decay_code", "products"]].copy()
    df_display.columns = headings
    click.echo(df_display.to_string(index=False, na_rep="---"))


@cli.command()
@click.option("--lang", "-l", default=None, help="Language code for names and numbers")
def table(lang: str | None):
    """
    Print nuclides, isotopes and translations in fixed-width columns.
    """
    click.echo(format_fixed_width(get_catalog(), lang))


@cli.command(name="json")
@click.option("--js", "javascript", is_flag=True, help="Emit a JavaScript object body")
def json_command(javascript: bool):
    """
    Print the catalog and its localized terms as JSON.
    """
    click.echo(format_json(get_catalog(), javascript=javascript))


@cli.command()
def html():
    """
    Print one HTML table cell per element.
    """
    click.echo(format_html_cells(get_catalog()))


@cli.command()
def longtable():
    """
    Print the 32-column long-form periodic table.
    """
    for line in get_catalog().get_long_table():
        click.echo(line)


@cli.command()
@click.option("--output", "-o", type=click.Path(), help="Output file path")
@click.option("--format", "fmt", type=click.Choice(["csv", "json"]),
              default="csv", help="Output format")
@click.option("--isotopes", "of_isotopes", is_flag=True, help="Export isotopes instead of nuclides")
@click.option("--lang", "-l", default=None, help="Language code for names and terms")
def export(output: str | None, fmt: str, of_isotopes: bool, lang: str | None):
    """
    Export the catalog to a file.

    Examples:

        nuclidetable export -o nuclides.csv

        nuclidetable export --isotopes --format json -o isotopes.json
    """
    catalog = get_catalog()
    lang = lang or Config.DEFAULT_LANGUAGE

    if of_isotopes:
        df = catalog.isotopes_dataframe(lang)
        what = "isotopes"
    else:
        df = catalog.to_dataframe(lang)
        what = "nuclides"

    if output is None:
        output = f"{what}.{fmt}"

    click.echo(f"Exporting {len(df)} {what}...")
    try:
        if fmt == "csv":
            df.to_csv(output, index=False)
        else:
            df.to_json(output, orient="records", indent=2, force_ascii=False)
    except OSError as e:
        click.echo(f"Error: Cannot write {output}: {e}", err=True)
        sys.exit(1)

    click.echo(f"Saved to {output}")


@cli.command()
@click.option("--output", "-o", type=click.Path(), default="periodic_table.png",
              help="Image file path")
@click.option("--theme", type=click.Choice(
    ["categories", "blocks", "history", "biology", "occurrence", "stability", "states"]),
    default="categories", help="Property that colors the cells")
@click.option("--chart", type=click.Choice(["table", "isotopes"]), default="table",
              help="Periodic table or N-Z isotope chart")
@click.option("--lang", "-l", default=None, help="Language code for legend and title")
@click.option("--dpi", type=int, default=150, help="Image resolution")
def plot(output: str, theme: str, chart: str, lang: str | None, dpi: int):
    """
    Save a chart of the catalog as an image.

    Examples:

        nuclidetable plot --theme stability -o stability.png

        nuclidetable plot --chart isotopes -o isotopes.png
    """
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    from .plotting import plot_isotope_chart, plot_periodic_table

    lang = lang or Config.DEFAULT_LANGUAGE
    if chart == "isotopes":
        color_by = theme if theme in ("stability", "occurrence") else "stability"
        fig = plot_isotope_chart(get_catalog(), color_by=color_by, lang=lang)
    else:
        fig = plot_periodic_table(get_catalog(), theme=theme, lang=lang)

    try:
        fig.savefig(output, dpi=dpi)
    except OSError as e:
        click.echo(f"Error: Cannot write {output}: {e}", err=True)
        sys.exit(1)
    finally:
        plt.close(fig)

    click.echo(f"Saved to {output}")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == '__main__':
    main()
