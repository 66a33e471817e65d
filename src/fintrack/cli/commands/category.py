"""Category management commands."""

import click
from fintrack.cli.error_handling import handle_domain_error
from fintrack.domain.category import CategoryService
from fintrack.domain.errors import DomainError


@click.group()
def category_group():
    """Manage categories."""
    pass


@category_group.command("list")
@click.pass_context
def list_categories(ctx):
    """List all categories."""
    db = ctx.obj["db"]
    service = CategoryService(db)

    categories = service.list_categories()
    if not categories:
        click.echo("No categories found. Use 'category create' to add one.")
        return

    click.echo("\nCategories:")
    click.echo("-" * 40)
    for cat in categories:
        click.echo(f"ID: {cat.id:3d} | {cat.name}")


@category_group.command("create")
@click.argument("name")
@click.pass_context
def create_category(ctx, name: str):
    """Create a new category.

    Examples:
        fintrack category create "Groceries"
    """
    db = ctx.obj["db"]
    service = CategoryService(db)

    try:
        category_id = service.create_category(name=name)
        click.echo(f"Created category '{name.strip()}' (ID: {category_id})")
    except DomainError as e:
        handle_domain_error(ctx, e)


@category_group.command("delete")
@click.argument("category_id", type=int)
@click.pass_context
def delete_category(ctx, category_id: int):
    """Delete a category that has no transactions."""
    db = ctx.obj["db"]
    service = CategoryService(db)

    try:
        category = service.require_category(category_id)
        service.delete_category(category_id)
        click.echo(f"Deleted category '{category.name}'")
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
