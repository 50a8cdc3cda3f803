"""Tests for the command line interface."""

import re

import pytest

from equiledger.cli.main import cli


@pytest.fixture
def invoke(cli_runner, temp_db):
    """Invoke the CLI against the temporary database as supplier-1."""

    def _invoke(*args, supplier="supplier-1", input=None):
        base = ["--db-path", temp_db.database_path]
        if supplier:
            base += ["--supplier", supplier]
        return cli_runner.invoke(
            cli, base + list(args), input=input, env={"EQUILEDGER_SUPPLIER_ID": None}
        )

    return _invoke


def _created_id(output: str) -> str:
    match = re.search(r"(?:Registered sale|Added expense) (\S+)|\(ID: ([^)]+)\)", output)
    assert match is not None, output
    return match.group(1) or match.group(2)


def test_help_does_not_need_supplier(cli_runner):
    result = cli_runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "sale" in result.output
    assert "report" in result.output


def test_missing_supplier(invoke):
    result = invoke("sale", "list", supplier=None)

    assert result.exit_code == 1
    assert "No supplier selected" in result.output


def test_sale_workflow(invoke):
    result = invoke(
        "sale", "add", "--product", "Horseshoe set", "--value", "150,00",
        "--profit", "60", "--payment", "pix", "--date", "2024-01-15",
    )
    assert result.exit_code == 0, result.output
    assert "Value: R$ 150,00" in result.output
    sale_id = _created_id(result.output)

    result = invoke("sale", "list", "--month", "2024-01")
    assert result.exit_code == 0
    assert sale_id in result.output
    assert "40%" in result.output

    result = invoke("sale", "delete", sale_id, "--yes")
    assert result.exit_code == 0
    assert f"Deleted sale {sale_id}" in result.output

    result = invoke("sale", "delete", sale_id, "--yes")
    assert result.exit_code == 0
    assert "already deleted" in result.output


def test_sale_delete_asks_for_confirmation(invoke):
    sale_id = _created_id(invoke("sale", "add", "--product", "Rasp", "--value", "10").output)

    result = invoke("sale", "delete", sale_id, input="n\n")

    assert result.exit_code == 1
    result = invoke("sale", "list")
    assert sale_id in result.output


def test_sale_add_invalid_value(invoke):
    result = invoke("sale", "add", "--product", "Rasp", "--value", "ten")

    assert result.exit_code == 1
    assert "Invalid sale value" in result.output


def test_sale_add_negative_value(invoke):
    result = invoke("sale", "add", "--product", "Rasp", "--value", "-5")

    assert result.exit_code == 1
    assert "must not be negative" in result.output


def test_expense_workflow(invoke):
    result = invoke(
        "expense", "add", "--category", "fuel_travel", "--amount", "80,50",
        "--date", "2024-01-10", "--description", "Trip",
    )
    assert result.exit_code == 0, result.output
    assert "Fuel/Travel" in result.output
    expense_id = _created_id(result.output)

    result = invoke("expense", "list", "--month", "2024-01")
    assert result.exit_code == 0
    assert "Month total" in result.output
    assert "R$ 80,50" in result.output

    result = invoke("expense", "delete", expense_id)
    assert result.exit_code == 0
    assert f"Deleted expense {expense_id}" in result.output

    result = invoke("expense", "list", "--month", "2024-01")
    assert "No expenses recorded in 2024-01." in result.output


def test_settings(invoke):
    result = invoke("settings", "show")
    assert "Tax rate: 0%" in result.output

    result = invoke("settings", "set-tax", "11,5")
    assert result.exit_code == 0
    assert "Tax rate set to 11.5%" in result.output

    result = invoke("settings", "set-tax", "120")
    assert result.exit_code == 1
    assert "between 0 and 100" in result.output


def test_report_summary(invoke):
    invoke("settings", "set-tax", "10")
    invoke("sale", "add", "--product", "Rasp", "--value", "100", "--profit", "40",
           "--date", "2024-01-15")
    invoke("expense", "add", "--category", "food", "--amount", "20", "--date", "2024-01-16")

    result = invoke("report", "summary", "--month", "2024-01")

    assert result.exit_code == 0, result.output
    assert "Month Summary (01/2024)" in result.output
    assert "R$ 100,00" in result.output
    assert "Taxes (10%)" in result.output
    assert "R$ 10,00" in result.output
    assert "Expenses by category" in result.output


def test_report_summary_invalid_month(invoke):
    result = invoke("report", "summary", "--month", "2024-13")

    assert result.exit_code == 1
    assert "Invalid month" in result.output


def test_report_stats_and_daily(invoke):
    invoke("sale", "add", "--product", "Rasp", "--value", "100", "--profit", "25",
           "--date", "2024-02-03")

    result = invoke("report", "stats", "--month", "2024-02")
    assert "Total sales:    1" in result.output
    assert "Average margin: 25%" in result.output

    result = invoke("report", "daily", "--month", "2024-02")
    assert "Total: 1 sales, R$ 100,00" in result.output

    result = invoke("report", "daily", "--month", "2024-03")
    assert "No sales registered in 2024-03." in result.output


def test_report_monthly(invoke):
    invoke("sale", "add", "--product", "Rasp", "--value", "100", "--date", "2024-05-03")

    result = invoke("report", "monthly", "--year", "2024")

    assert result.exit_code == 0
    assert "Monthly Report (2024)" in result.output
    assert "2024-05" in result.output
    assert "2024-12" in result.output


def test_report_export_csv(invoke, tmp_path):
    invoke("sale", "add", "--product", "Rasp", "--value", "1234,5", "--profit", "1234,5",
           "--date", "2024-01-15")
    output = tmp_path / "report.csv"

    result = invoke("report", "export-csv", "--year", "2024", "-o", str(output))

    assert result.exit_code == 0, result.output
    assert f"Wrote {output}" in result.output
    data = output.read_bytes()
    assert data.startswith(b"\xef\xbb\xbf")
    lines = data.decode("utf-8-sig").splitlines()
    assert lines[0] == "Month;Revenue;Expenses;Taxes;Profit"
    assert lines[1] == "2024-01;1234,50;0,00;0,00;1234,50"
    assert len(lines) == 13


def test_report_export_csv_month_and_annual(invoke, tmp_path):
    invoke("sale", "add", "--product", "Rasp", "--value", "50", "--date", "2024-01-15")

    month_file = tmp_path / "month.csv"
    result = invoke("report", "export-csv", "--month", "2024-01", "-o", str(month_file))
    assert result.exit_code == 0
    assert month_file.read_text(encoding="utf-8-sig").splitlines()[1].startswith("01/2024;50,00")

    annual_file = tmp_path / "annual.csv"
    result = invoke("report", "export-csv", "--annual", "-o", str(annual_file))
    assert result.exit_code == 0
    assert annual_file.read_text(encoding="utf-8-sig").splitlines()[1].startswith("2024;50,00")


def test_report_export_csv_rejects_combined_options(invoke):
    result = invoke("report", "export-csv", "--year", "2024", "--annual")

    assert result.exit_code == 1
    assert "cannot be combined" in result.output


def test_report_export_html(invoke, tmp_path):
    invoke("sale", "add", "--product", "Rasp", "--value", "50", "--date", "2024-01-15")
    output = tmp_path / "report.html"

    result = invoke(
        "report", "export-html", "--year", "2024", "--month", "2024-01",
        "-o", str(output), "--no-print",
    )

    assert result.exit_code == 0, result.output
    html = output.read_text(encoding="utf-8")
    assert "Financial Reports" in html
    assert "Period Summary (01/2024)" in html
    assert "Generated at" in html
    assert "window.print()" not in html


def test_product_commands(invoke):
    result = invoke("product", "add", "Farrier rasp", "--price", "90", "--original-price", "100")
    assert result.exit_code == 0, result.output
    assert "10% OFF" in result.output
    product_id = _created_id(result.output)

    result = invoke("product", "price", product_id)
    assert "Original: R$ 100,00" in result.output
    assert "Installments: 3x R$ 30,00" in result.output

    result = invoke("product", "list")
    assert "Farrier rasp" in result.output

    result = invoke("product", "delete", product_id)
    assert result.exit_code == 0
    result = invoke("product", "list")
    assert "No products found." in result.output


def test_product_price_missing(invoke):
    result = invoke("product", "price", "nope")

    assert result.exit_code == 1
    assert "Product nope not found" in result.output


def test_product_list_seeds_demo_catalog(cli_runner, temp_db):
    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "--supplier", "supplier-1", "product", "list"],
        env={"EQUILEDGER_SEED_DEMO_DATA": "true"},
    )

    assert result.exit_code == 0, result.output
    assert "demo products" in result.output
    assert "Leather saddle" in result.output


def test_client_commands(invoke):
    result = invoke("client", "add", "Haras Boa Vista", "--email", "contato@boavista.com")
    assert result.exit_code == 0
    client_id = _created_id(result.output)

    result = invoke("client", "add", "Other", "--email", "CONTATO@boavista.com")
    assert result.exit_code == 1
    assert "already exists" in result.output

    result = invoke("client", "list")
    assert "Haras Boa Vista" in result.output

    result = invoke("sale", "add", "--product", "Rasp", "--value", "10", "--client", client_id)
    assert result.exit_code == 0
    result = invoke("sale", "add", "--product", "Rasp", "--value", "10", "--client", "missing")
    assert result.exit_code == 1
    assert "Client missing not found" in result.output


def test_sale_date_option_is_a_local_day(invoke, sao_paulo_tz):
    result = invoke("sale", "add", "--product", "Rasp", "--value", "10", "--date", "2024-01-31")
    assert result.exit_code == 0, result.output
    sale_id = _created_id(result.output)

    january = invoke("sale", "list", "--month", "2024-01")
    february = invoke("sale", "list", "--month", "2024-02")

    assert sale_id in january.output
    assert "31/01/2024" in january.output
    assert "No sales registered in 2024-02." in february.output
