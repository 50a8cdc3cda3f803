"""Expense commands."""

import click
from equiledger.cli.error_handling import handle_domain_error
from equiledger.cli.month_filters import resolve_cli_amount, resolve_cli_date, resolve_cli_month
from equiledger.cli.supplier_resolution import require_supplier
from equiledger.domain.entities import EXPENSE_CATEGORY_LABELS, ExpenseCategory
from equiledger.domain.errors import DomainError
from equiledger.domain.expense import ExpenseService
from equiledger.domain.summary import expenses_by_category
from equiledger.utils.formatters import format_brl


@click.group("expense")
def expense_group():
    """Record and manage expenses."""
    pass


@expense_group.command("add")
@click.option(
    "--category",
    required=True,
    type=click.Choice([c.value for c in ExpenseCategory]),
    help="Expense category",
)
@click.option("--amount", required=True, help="Amount spent")
@click.option("--date", "expense_date", help="Expense date (defaults to today)")
@click.option("--description", help="Description")
@click.pass_context
def add_expense(ctx, category: str, amount: str, expense_date: str | None, description: str | None):
    """Record an expense.

    Examples:
        equiledger expense add --category fuel_travel --amount 80,50 --date 2024-01-10
        equiledger expense add --category materials --amount 230 --description "Nails"
    """
    supplier_id = require_supplier(ctx)
    service = ExpenseService(ctx.obj["db"])

    parsed_amount = resolve_cli_amount(ctx, amount, "amount")
    parsed_date = resolve_cli_date(ctx, expense_date)

    try:
        expense = service.add_expense(
            supplier_id=supplier_id,
            category=category,
            amount=parsed_amount,
            expense_date=parsed_date,
            description=description,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Added expense {expense.id}")
    click.echo(f"  Category: {EXPENSE_CATEGORY_LABELS[expense.category]}")
    click.echo(f"  Amount: {format_brl(expense.amount)}")
    click.echo(f"  Date: {expense.expense_date.strftime('%d/%m/%Y')}")


@expense_group.command("list")
@click.option("--month", help="Month (YYYY-MM, 'this month', 'last month'); defaults to current")
@click.pass_context
def list_expenses(ctx, month: str | None):
    """List the expenses of a month with per-category totals."""
    supplier_id = require_supplier(ctx)
    month_key = resolve_cli_month(ctx, month)
    service = ExpenseService(ctx.obj["db"])

    expenses = service.list_expenses(supplier_id, month_key=month_key)
    if not expenses:
        click.echo(f"No expenses recorded in {month_key}.")
        return

    click.echo(f"\nExpenses for {month_key}:")
    click.echo("-" * 100)
    click.echo(f"{'ID':<36} {'Date':<10} {'Category':<26} {'Amount':>12}  Description")
    click.echo("-" * 100)
    for expense in expenses:
        click.echo(
            f"{expense.id:<36} {expense.expense_date.strftime('%d/%m/%Y'):<10} "
            f"{EXPENSE_CATEGORY_LABELS[expense.category]:<26} "
            f"{format_brl(expense.amount):>12}  {expense.description or ''}"
        )

    click.echo("-" * 100)
    totals = expenses_by_category(expenses)
    for category, total in sorted(totals.items(), key=lambda item: -item[1]):
        click.echo(f"{EXPENSE_CATEGORY_LABELS[category]:<74} {format_brl(total):>12}")
    click.echo(f"{'Month total':<74} {format_brl(sum(totals.values())):>12}")


@expense_group.command("delete")
@click.argument("expense_id")
@click.pass_context
def delete_expense(ctx, expense_id: str):
    """Delete an expense."""
    supplier_id = require_supplier(ctx)
    service = ExpenseService(ctx.obj["db"])

    try:
        deleted = service.delete_expense(supplier_id, expense_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if deleted:
        click.echo(f"Deleted expense {expense_id}")
    else:
        click.echo(f"Expense {expense_id} was already deleted")


def register_commands(cli):
    """Register expense commands with main CLI."""
    cli.add_command(expense_group)
