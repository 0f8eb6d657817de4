import typer

from typer import Argument, Option

from core.logging_config import setup_logging
from fields.pages import PAGE_INDEX

app = typer.Typer()


@app.callback()
def main(log_level: str = Option(None, "--log-level")):
    setup_logging(log_level=log_level.upper() if log_level else None)


@app.command("field-types")
def field_types():
    """List registered field types and the attributes they accept"""
    from services.field_type_loader_service import get_field_type_loader

    for handle, field_class in sorted(get_field_type_loader().get_all_field_types().items()):
        declared = ", ".join(field_class.declared_attributes) or "-"
        typer.echo(f"{handle:<10} {field_class.__name__:<10} {declared}")


@app.command()
def render(
    type_name: str = Argument(..., help="Field type handle or class name"),
    title: str = Argument(...),
    page: str = Option(PAGE_INDEX, "--page"),
    value: str = Option(None, "--value"),
    field_id: str = Option(None, "--id"),
):
    """Render a single field against a one-attribute record"""
    from core.exceptions import FieldError
    from models.record import DictRecord
    from services.field_type_loader_service import get_field_type_loader

    field_class = get_field_type_loader().get_field_type(type_name)
    if field_class is None:
        typer.echo(f"Unknown field type: {type_name}", err=True)
        raise typer.Exit(code=1)

    field = field_class.make(title, field_id)
    field.set_model(DictRecord({field.id(): value}))

    try:
        output = field.render(page)
    except FieldError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)

    typer.echo(str(output).strip())


if __name__ == "__main__":
    app()
