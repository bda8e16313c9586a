"""
Unit tests for the grouped account table.
"""

import io
from typing import List

from simplefin_cli.core.correlator import correlate_errors
from simplefin_cli.core.decoder import decode_payload
from simplefin_cli.render.accounts import (
    WARNING_GLYPH,
    build_account_table,
    render_table,
    sort_accounts,
)


def _render(accounts) -> str:
    out = io.StringIO()
    render_table(accounts, out)
    return out.getvalue()


def _data_rows(output: str) -> List[List[str]]:
    """Cell text of every row line after the header."""
    rows = [
        [cell.strip() for cell in line.split("│")[1:-1]]
        for line in output.splitlines()
        if line.startswith("│")
    ]
    return rows[1:]


def _separator_count(output: str) -> int:
    """Separator lines between data rows (the header rule is not counted)."""
    rules = sum(1 for line in output.splitlines() if line.startswith("├"))
    return max(rules - 1, 0)


class TestSortAccounts:
    """Tests for sort_accounts."""

    def test_sort_by_org_then_name(self, make_account) -> None:
        """Test ordering by organization name, then account name."""
        accounts = [make_account("B", "x"), make_account("A", "z"), make_account("A", "y")]
        ordered = sort_accounts(accounts)
        assert [(acc.org.name, acc.name) for acc in ordered] == [("A", "y"), ("A", "z"), ("B", "x")]

    def test_sort_is_stable(self, make_account) -> None:
        """Test that equal keys keep their input order."""
        first = make_account("A", "same", balance="1")
        second = make_account("A", "same", balance="2")
        ordered = sort_accounts([first, second])
        assert [acc.balance for acc in ordered] == ["1", "2"]

    def test_sort_is_code_point_order(self, make_account) -> None:
        """Test that uppercase sorts before lowercase."""
        ordered = sort_accounts([make_account("bank", "a"), make_account("Zeta", "a")])
        assert [acc.org.name for acc in ordered] == ["Zeta", "bank"]

    def test_input_not_modified(self, make_account) -> None:
        """Test that the caller's list keeps its order."""
        accounts = [make_account("B", "x"), make_account("A", "z")]
        sort_accounts(accounts)
        assert [acc.org.name for acc in accounts] == ["B", "A"]


class TestRenderTable:
    """Tests for render_table."""

    def test_single_row(self) -> None:
        """Test the minimal body renders one unflagged row."""
        doc = decode_payload(
            b'{"Accounts": [{"Org": {"Name": "TestOrg"}, "Name": "TestAccount", '
            b'"Balance": "1000", "Currency": "USD"}]}'
        )
        output = _render(doc.accounts)
        assert _data_rows(output) == [["TestOrg", "TestAccount", "1000", "USD", ""]]
        assert WARNING_GLYPH not in output

    def test_header(self) -> None:
        """Test the header columns."""
        output = _render([])
        header = [cell.strip() for cell in output.splitlines()[1].split("│")[1:-1]]
        assert header == ["Bank", "Account Name", "Balance", "Currency", ""]

    def test_empty_accounts_renders_header_only(self) -> None:
        """Test that zero accounts render without rows or failure."""
        output = _render([])
        assert _data_rows(output) == []
        assert len(output.splitlines()) == 3

    def test_row_order(self, make_account) -> None:
        """Test that rows come out sorted."""
        accounts = [make_account("B", "x"), make_account("A", "z"), make_account("A", "y")]
        rows = _data_rows(_render(accounts))
        assert [row[1] for row in rows] == ["y", "z", "x"]

    def test_separator_between_orgs_only(self, make_account) -> None:
        """Test that a separator appears exactly at each org change."""
        accounts = [
            make_account("A", "1"),
            make_account("A", "2"),
            make_account("B", "1"),
            make_account("C", "1"),
            make_account("C", "2"),
        ]
        assert _separator_count(_render(accounts)) == 2

    def test_no_separator_within_single_org(self, make_account) -> None:
        """Test that rows of one organization are not separated."""
        accounts = [make_account("A", "1"), make_account("A", "2"), make_account("A", "3")]
        assert _separator_count(_render(accounts)) == 0

    def test_separator_placement(self, make_account) -> None:
        """Test that the separator sits between the last A row and the first B row."""
        lines = _render([make_account("B", "x"), make_account("A", "y")]).splitlines()
        body = lines[3:-1]
        assert body[0].startswith("│")
        assert body[1].startswith("├")
        assert body[2].startswith("│")

    def test_org_column_merges_repeats(self, make_account) -> None:
        """Test that the bank name is printed once per group."""
        accounts = [make_account("A", "1"), make_account("A", "2"), make_account("B", "1")]
        rows = _data_rows(_render(accounts))
        assert [row[0] for row in rows] == ["A", "", "B"]

    def test_balance_is_right_aligned(self, make_account) -> None:
        """Test that balances line up on the right."""
        accounts = [make_account("A", "1", balance="5.00"), make_account("A", "2", balance="12345.67")]
        lines = [line for line in _render(accounts).splitlines() if line.startswith("│")]
        balance_cells = [line.split("│")[3] for line in lines[1:]]
        assert balance_cells == ["     5.00 ", " 12345.67 "]

    def test_flagged_account_shows_warning(self, make_account) -> None:
        """Test the warning glyph for flagged accounts only."""
        flagged = make_account("A", "1")
        flagged.possible_error = True
        rows = _data_rows(_render([flagged, make_account("B", "1")]))
        assert [row[4] for row in rows] == [WARNING_GLYPH, ""]

    def test_sample_payload(self, sample_payload: bytes) -> None:
        """Test rendering a realistic, correlated payload."""
        doc = correlate_errors(decode_payload(sample_payload))
        output = _render(doc.accounts)
        rows = _data_rows(output)
        assert [(row[0], row[1]) for row in rows] == [
            ("Citibank", "Double Cash"),
            ("Fidelity Investments", "Brokerage"),
            ("", "Roth IRA"),
            ("Hanscom Federal CU", "Share Savings"),
            ("Wealthfront", "Cash Account"),
        ]
        assert [row[4] for row in rows] == ["", WARNING_GLYPH, WARNING_GLYPH, WARNING_GLYPH, ""]
        assert _separator_count(output) == 3

    def test_build_account_table_does_not_render(self, make_account) -> None:
        """Test that building the table leaves output to the caller."""
        table = build_account_table([make_account("A", "1")])
        assert len(table.rows) == 1
