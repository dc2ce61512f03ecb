from forestledger.repositories.forest import Forest
from forestledger.services.account_loader import load_accounts_from_file, load_accounts_from_lines


def test_load_accounts_from_lines_skips_and_reports():
    forest = Forest()
    lines = [
        "100 Cash\n",
        "\n",
        "   \t  \n",
        "  200   Bank account  \n",
        "300\n",
        "30a Bad number\n",
        "100 Duplicate cash\n",
        "400\tTabbed description with space\n",
    ]

    report = load_accounts_from_lines(forest, lines)

    assert report.loaded == ["100", "200"]
    reasons = {s.line_no: s.reason for s in report.skipped}
    assert reasons == {
        5: "invalid line format",
        6: "invalid account number",
        7: "duplicate account",
        8: "invalid account number",
    }
    assert forest.search_account("200").description == "Bank account"
    assert forest.search_account("100").description == "Cash"
    assert len(forest) == 2


def test_load_accounts_from_file(tmp_path):
    path = tmp_path / "accounts.txt"
    path.write_text("1 Assets\n2 Liabilities\n\n3 Equity\n", encoding="utf-8")
    forest = Forest()

    report = load_accounts_from_file(forest, path)

    assert report.ok
    assert report.loaded == ["1", "2", "3"]
    assert [a.number for a in forest.roots()] == ["1", "2", "3"]


def test_load_accounts_from_missing_file(tmp_path):
    forest = Forest()
    report = load_accounts_from_file(forest, tmp_path / "nope.txt")

    assert not report.ok
    assert "Could not open file" in report.error
    assert len(forest) == 0
