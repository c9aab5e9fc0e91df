"""Main CLI entry point for object-faker.

Generates populated instances of a model class from the command line.
"""

from pathlib import Path
from typing import Any
import json
import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from object_faker import __version__
from object_faker.engine.fake import Fake
from object_faker.engine.matcher import Matcher
from object_faker.profiles.base import FakeProfile
from object_faker.profiles.loader import load_profile
from object_faker.schemas.introspect import describe_type
from object_faker.schemas.types import is_choice_type, is_collection, type_name
from object_faker.selectors.registry import TypeTable
from object_faker.utils.helpers import generate_seed, load_target, to_primitive

console = Console()


@click.group()
@click.version_option(version=__version__, prog_name="object-faker")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """object-faker - Populate data classes with synthetic values.

    TARGET arguments are import references of the form 'package.module:ClassName'.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@cli.command()
@click.argument("target")
@click.option("--count", "-n", type=int, default=1, help="Number of instances")
@click.option("--seed", "-s", type=int, help="Random seed for reproducibility")
@click.option("--nullable", is_flag=True, help="Allow None for Optional fields")
@click.option("--null-probability", type=click.FloatRange(0.0, 1.0), help="Chance of None for nullable fields")
@click.option("--profile", "-p", "profile_path", type=click.Path(exists=True), help="YAML profile file")
@click.option("--output", "-o", type=click.Path(), help="Output file (stdout if not specified)")
@click.option("--pretty", is_flag=True, help="Pretty print JSON output")
@click.pass_context
def generate(
    ctx: click.Context,
    target: str,
    count: int,
    seed: int | None,
    nullable: bool,
    null_probability: float | None,
    profile_path: str | None,
    output: str | None,
    pretty: bool,
) -> None:
    """Generate populated instances of TARGET as JSON."""
    verbose = ctx.obj.get("verbose", False)

    try:
        model = load_target(target)
        profile = load_profile(profile_path) if profile_path else FakeProfile()
        if seed is None and profile.seed is None:
            seed = generate_seed()

        fake = Fake(
            model,
            nullable=True if nullable else None,
            null_probability=null_probability,
            seed=seed,
            profile=profile,
        )
        records = [to_primitive(instance) for instance in fake.generate_many(count)]
        json_output = json.dumps(records, indent=2 if pretty else None, default=str)

        if output:
            Path(output).write_text(json_output)
            console.print(Panel.fit(
                f"[green]Wrote {count} {type_name(model)} records to {output}[/green]\n"
                f"Seed: {fake.seed}",
                title="Generation Complete",
            ))
        else:
            click.echo(json_output)

    except Exception as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        if verbose:
            import traceback
            console.print(traceback.format_exc())
        sys.exit(1)


@cli.command()
@click.argument("target")
@click.pass_context
def inspect(ctx: click.Context, target: str) -> None:
    """Show how each field of TARGET would be populated."""
    verbose = ctx.obj.get("verbose", False)

    try:
        model = load_target(target)
    except ValueError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    matcher = Matcher(TypeTable())
    fields = describe_type(model)

    if not fields:
        console.print(f"[yellow]{type_name(model)} has no populatable fields[/yellow]")
        return

    table = Table(title=f"Fields of {type_name(model)}")
    table.add_column("Field", style="cyan")
    table.add_column("Type", style="green")
    table.add_column("Nullable", justify="center")
    table.add_column("Source")

    for field in fields:
        nullable = "yes" if field.nullable else ""
        table.add_row(
            field.name,
            escape(type_name(field.field_type)),
            nullable,
            _describe_source(matcher, model, field),
        )

    console.print(table)
    if verbose:
        console.print(f"\n{len(fields)} fields")


@cli.command("list-selectors")
@click.option("--locale", help="Faker locale for the default selectors")
def list_selectors(locale: str | None) -> None:
    """List the default selectors by type and priority."""
    type_table = TypeTable(locale=locale)

    table = Table(title="Registered Selectors")
    table.add_column("Type", style="cyan")
    table.add_column("Selector", style="green")
    table.add_column("Priority", justify="right")

    for target_type in type_table.registered_types():
        for selector in type_table.get_selectors(target_type):
            table.add_row(escape(type_name(target_type)), escape(repr(selector)), str(int(selector.priority)))

    console.print(table)
    console.print(f"\nTotal: {len(type_table)} selectors")


def _describe_source(matcher: Matcher, model: Any, field: Any) -> str:
    """Explain where a field's value would come from."""
    if not field.writable:
        return "[dim]read-only[/dim]"
    if field.value_type is model:
        return "[dim]skipped (self reference)[/dim]"

    selectors = matcher.type_map.get_selectors(field.value_type)
    selector = matcher.evaluate_selectors(field, selectors)
    if selector is not None:
        return escape(repr(selector))
    if is_collection(field.value_type):
        return "collection (1-10 elements)"
    if is_choice_type(field.value_type):
        return "random choice"
    return "nested object"


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
