"""Tests for the command line interface."""

from decimal import Decimal

from ledgerlens.cli.main import cli
from ledgerlens.domain.entities import TargetType, TransactionType
from tests.conftest import USER_ID


def _invoke(cli_runner, db, *args):
    return cli_runner.invoke(cli, ["--db-path", db.database_path, "--user", USER_ID, *args])


def test_help_does_not_need_database(cli_runner):
    result = cli_runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "metrics" in result.output
    assert "net-worth" in result.output


def test_metrics_command(cli_runner, sample_ledger):
    result = _invoke(cli_runner, sample_ledger, "metrics", "--month", "2024-02")

    assert result.exit_code == 0
    assert "Metrics for 2024-02:" in result.output
    assert "3,000.00" in result.output
    assert "1,500.00" in result.output
    assert "+500.00 (+50.0%)" in result.output


def test_metrics_rejects_invalid_month(cli_runner, sample_ledger):
    result = _invoke(cli_runner, sample_ledger, "metrics", "--month", "2024-13")

    assert result.exit_code == 1
    assert "Invalid month" in result.output


def test_categories_command(cli_runner, sample_ledger):
    result = _invoke(cli_runner, sample_ledger, "categories", "--month", "2024-02")

    assert result.exit_code == 0
    lines = result.output.splitlines()
    names = [line.split()[0] for line in lines if line.startswith(("Rent", "Groceries", "Dining"))]
    assert names == ["Rent", "Groceries", "Dining"]
    assert "3 categories" in result.output


def test_categories_with_trends(cli_runner, sample_ledger):
    result = _invoke(cli_runner, sample_ledger, "categories", "--month", "2024-03", "--trends")

    assert result.exit_code == 0
    assert "Shopping" in result.output
    assert "Dining Out" in result.output
    assert "-300.00" in result.output


def test_categories_for_empty_month(cli_runner, sample_ledger):
    result = _invoke(cli_runner, sample_ledger, "categories", "--month", "2023-06")

    assert result.exit_code == 0
    assert "No expenses found for 2023-06." in result.output


def test_history_command(cli_runner, sample_ledger):
    result = _invoke(
        cli_runner, sample_ledger, "history", "--month", "2024-03", "--window", "3", "--workers", "2"
    )

    assert result.exit_code == 0
    assert "Monthly comparison:" in result.output
    months = [line[:7] for line in result.output.splitlines() if line.startswith("2024-")]
    assert months == ["2024-01", "2024-02", "2024-03"]


def test_history_show_clamps_to_available_months(cli_runner, sample_ledger):
    result = _invoke(
        cli_runner, sample_ledger, "history", "--month", "2024-03", "--window", "3", "--show", "1"
    )

    assert result.exit_code == 0
    months = [line[:7] for line in result.output.splitlines() if line.startswith("2024-")]
    assert months == ["2024-03"]


def test_history_rejects_empty_window(cli_runner, sample_ledger):
    result = _invoke(cli_runner, sample_ledger, "history", "--window", "0")

    assert result.exit_code != 0


def test_net_worth_command(cli_runner, sample_ledger):
    result = _invoke(cli_runner, sample_ledger, "net-worth", "--month", "2024-03", "--window", "3")

    assert result.exit_code == 0
    assert "Net worth:" in result.output
    assert "13,500.00" in result.output
    assert "14,500.00" in result.output


def test_health_command(cli_runner, sample_ledger):
    result = _invoke(cli_runner, sample_ledger, "health", "--month", "2024-03")

    assert result.exit_code == 0
    assert "Health score for 2024-03: 15/100" in result.output


def test_targets_command(cli_runner, sample_ledger):
    result = _invoke(cli_runner, sample_ledger, "targets", "--month", "2024-02")

    assert result.exit_code == 0
    assert "Savings goals:" in result.output
    assert "Emergency fund" in result.output
    assert "Budgets for 2024-02:" in result.output
    assert "OVER" in result.output


def test_targets_filtered_by_type(cli_runner, sample_ledger):
    result = _invoke(cli_runner, sample_ledger, "targets", "--month", "2024-03", "--type", "savings")

    assert result.exit_code == 0
    assert "Emergency fund" in result.output
    assert "Budgets for" not in result.output


def test_targets_without_any(cli_runner, temp_db):
    result = _invoke(cli_runner, temp_db, "targets")

    assert result.exit_code == 0
    assert "No targets found." in result.output


def test_add_transaction(cli_runner, temp_db):
    result = _invoke(
        cli_runner,
        temp_db,
        "add",
        "transaction",
        "--type",
        "expense",
        "--amount",
        "$1,042.50",
        "--category",
        "grocery",
        "--date",
        "2024-05-04",
    )

    assert result.exit_code == 0
    assert "Created transaction" in result.output
    assert "Category: Groceries" in result.output

    transactions = temp_db.query_transactions(USER_ID, month=5, year=2024)
    assert len(transactions) == 1
    assert transactions[0].type == TransactionType.EXPENSE
    assert transactions[0].amount == Decimal("1042.50")


def test_add_transaction_rejects_negative_amount(cli_runner, temp_db):
    result = _invoke(
        cli_runner, temp_db, "add", "transaction", "--type", "income", "--amount", "-5"
    )

    assert result.exit_code == 1
    assert "Invalid amount" in result.output
    assert temp_db.query_transactions(USER_ID) == []


def test_add_asset_and_target(cli_runner, temp_db):
    asset = _invoke(cli_runner, temp_db, "add", "asset", "--name", "Savings", "--value", "2500")
    target = _invoke(
        cli_runner,
        temp_db,
        "add",
        "target",
        "--title",
        "Dining",
        "--amount",
        "200",
        "--category",
        "restaurant",
        "--type",
        "budget",
    )

    assert asset.exit_code == 0
    assert "Created asset" in asset.output
    assert target.exit_code == 0
    assert "Created budget target" in target.output

    assert [a.current_value for a in temp_db.query_assets(USER_ID)] == [Decimal("2500")]
    targets = temp_db.query_targets(USER_ID)
    assert targets[0].target_type == TargetType.BUDGET
