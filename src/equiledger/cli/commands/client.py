"""Supplier client commands."""

import click
from equiledger.cli.error_handling import handle_domain_error
from equiledger.cli.supplier_resolution import require_supplier
from equiledger.domain.client import ClientService
from equiledger.domain.errors import DomainError


@click.group("client")
def client_group():
    """Manage your clients."""
    pass


@client_group.command("add")
@click.argument("name")
@click.option("--email", help="Client email")
@click.option("--phone", help="Client phone")
@click.pass_context
def add_client(ctx, name: str, email: str | None, phone: str | None):
    """Add a client that sales can be linked to."""
    supplier_id = require_supplier(ctx)
    service = ClientService(ctx.obj["db"])

    try:
        client = service.create_client(supplier_id, name, email=email, phone=phone)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Created client '{client.name}' (ID: {client.id})")


@client_group.command("list")
@click.pass_context
def list_clients(ctx):
    """List clients."""
    supplier_id = require_supplier(ctx)
    clients = ClientService(ctx.obj["db"]).list_clients(supplier_id)
    if not clients:
        click.echo("No clients found.")
        return

    click.echo("\nClients:")
    click.echo("-" * 90)
    for client in clients:
        click.echo(f"{client.id} | {client.name:25s} | {client.email or '-':25s} | {client.phone or '-'}")


def register_commands(cli):
    """Register client commands with main CLI."""
    cli.add_command(client_group)
