from statement_ingest import ColumnMap, locate_header, map_columns
from statement_ingest.headers import ROLE_KEYWORDS


def test_maps_german_header_roles():
    score, columns = map_columns(["Buchungstag", "Verwendungszweck", "Betrag"])

    assert columns == ColumnMap(date=0, memo=1, amount=2)
    assert score == 8


def test_maps_english_header_with_payee_and_memo():
    score, columns = map_columns(["Date", "Payee", "Memo", "Amount"])

    assert columns == ColumnMap(date=0, payee=1, memo=2, amount=3)
    assert score == 10


def test_first_assignment_wins_but_every_match_scores():
    score, columns = map_columns(["Date", "Value Date", "Amount"])

    assert columns.date == 0
    assert columns.amount == 2
    assert score == 9


def test_cell_matching_several_roles_takes_the_earliest_role():
    assert [role for role, _ in ROLE_KEYWORDS] == [
        "date",
        "amount",
        "payee",
        "memo",
        "debit",
        "credit",
    ]

    _, columns = map_columns(["Booking Date", "Credit Amount", "Debit Memo"])

    assert columns == ColumnMap(date=0, amount=1, memo=2)


def test_cells_are_matched_case_insensitively_after_trimming():
    _, columns = map_columns(["  DATE ", " Paid Out", "Paid In  "])

    assert columns == ColumnMap(date=0, debit=1, credit=2)


def test_locate_header_skips_preamble_rows():
    lines = [
        "Kontoinhaber;Max Mustermann",
        "Zeitraum;01.01.2024 - 31.01.2024",
        "Buchungstag;Verwendungszweck;Betrag",
        "02.01.2024;LIDL SAGT DANKE;-23,45",
    ]

    match = locate_header(lines, ";")

    assert match is not None
    assert match.index == 2
    assert match.columns == ColumnMap(date=0, memo=1, amount=2)


def test_date_without_money_does_not_qualify():
    assert locate_header(["Date;Description;Reference"], ";") is None


def test_money_without_date_does_not_qualify():
    assert locate_header(["Description;Amount"], ";") is None


def test_single_debit_or_credit_column_qualifies():
    match = locate_header(["Date;Description;Credit"], ";")

    assert match is not None
    assert match.columns.credit == 2
    assert match.columns.amount is None


def test_highest_score_wins_and_ties_keep_earliest_row():
    lines = [
        "Date;Amount",
        "Date;Payee;Amount",
        "Date;Payee;Amount",
    ]

    match = locate_header(lines, ";")

    assert match is not None
    assert match.index == 1
    assert match.score == 8


def test_only_first_25_rows_are_scanned():
    lines = ["x;y"] * 25 + ["Date;Amount"]

    assert locate_header(lines, ";") is None
    assert locate_header(lines[1:], ";") is not None
