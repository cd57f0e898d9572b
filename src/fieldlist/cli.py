import importlib
import types
from typing import Any, Optional

import typer

from .config import Settings
from .description import FieldDescription
from .errors import FieldListError, FieldNotFoundError
from .logging import get_logger
from .model import FieldList, fields_of

app = typer.Typer(help="fieldlist – inspect the fields of a loaded dataclass", no_args_is_help=True)


class TargetError(Exception):
    """Raised when a TARGET cannot be resolved to a dataclass."""


def resolve_target(target: str) -> FieldList:
    """
    Import ``package.module:ClassName`` and return its field list.

    Raises:
        TargetError: If the module or attribute is missing, or is not a dataclass
    """
    module_name, sep, qualname = target.partition(":")
    if not sep or not module_name or not qualname:
        raise TargetError(f"Expected TARGET as 'module:ClassName', got {target!r}")

    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise TargetError(f"Cannot import module {module_name!r}: {exc}") from exc

    for part in qualname.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise TargetError(f"{module_name!r} has no attribute {qualname!r}") from exc

    try:
        return fields_of(obj)
    except TypeError as exc:
        raise TargetError(f"{target} is not a dataclass") from exc


def format_type(declared_type: Any, settings: Settings) -> str:
    if declared_type is None:
        return settings.type_placeholder
    if isinstance(declared_type, type) and not isinstance(declared_type, types.GenericAlias):
        return declared_type.__qualname__
    return str(declared_type)


def format_row(index: int, description: FieldDescription, settings: Settings) -> str:
    gap = " " * settings.column_gap
    columns = [str(index), description.name]
    if settings.show_types:
        columns.append(format_type(getattr(description, "declared_type", None), settings))
    return gap.join(columns)


@app.command()
def show(
    target: str = typer.Argument(..., help="Dataclass to inspect, as 'package.module:ClassName'"),
    start: Optional[int] = typer.Option(None, help="First field index to show"),
    stop: Optional[int] = typer.Option(None, help="Index after the last field to show"),
    show_types: bool = typer.Option(True, "--types/--no-types", help="Show declared field types"),
) -> None:
    """
    List the fields of a dataclass in declaration order.
    """
    logger = get_logger(__name__)
    settings = Settings(show_types=show_types)

    try:
        fields = resolve_target(target)
    except TargetError as exc:
        logger.error(str(exc))
        raise typer.Exit(code=2) from exc

    first = 0 if start is None else start
    try:
        selected = fields.sub_list(first, len(fields) if stop is None else stop)
    except FieldListError as exc:
        logger.error(f"Invalid field range: {exc}")
        raise typer.Exit(code=1) from exc

    logger.debug(f"Showing {len(selected)} of {len(fields)} fields of {target}")
    for offset, description in enumerate(selected):
        typer.echo(format_row(first + offset, description, settings))


@app.command()
def find(
    target: str = typer.Argument(..., help="Dataclass to inspect, as 'package.module:ClassName'"),
    name: str = typer.Argument(..., help="Exact, case-sensitive field name"),
) -> None:
    """
    Show the first field of a dataclass called NAME.
    """
    logger = get_logger(__name__)
    settings = Settings()

    try:
        fields = resolve_target(target)
    except TargetError as exc:
        logger.error(str(exc))
        raise typer.Exit(code=2) from exc

    try:
        description = fields.named(name)
    except FieldNotFoundError as exc:
        logger.error(f"{target} has no field {name!r}")
        raise typer.Exit(code=1) from exc

    typer.echo(format_row(fields.index(description), description, settings))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
