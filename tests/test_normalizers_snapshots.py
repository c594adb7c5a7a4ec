# ruff: noqa: E501
import textwrap
from decimal import Decimal

import pytest

from statement_ingest import RawRecord, StatementNormalizer, parse_statement
from statement_ingest.normalizers import UNKNOWN_DESCRIPTION


def _dedent(s: str) -> str:
    # Keep internal newlines, but normalize indentation for readability.
    return textwrap.dedent(s).lstrip("\n").rstrip()


def test_us_comma_export_snapshot():
    csv_text = _dedent(
        """
        Date,Description,Amount
        01/15/2024,STARBUCKS STORE #1234,-4.85
        01/16/2024,PAYROLL DEPOSIT ACME CORP,"2,500.00"
        """
    )

    rows = StatementNormalizer.normalize(text=csv_text)

    assert rows == [
        RawRecord(date="2024-01-15", description="STARBUCKS STORE #1234", amount=Decimal("-4.85")),
        RawRecord(date="2024-01-16", description="PAYROLL DEPOSIT ACME CORP", amount=Decimal("2500.00")),
    ]


def test_german_semicolon_export_with_preamble_snapshot():
    csv_text = _dedent(
        """
        Kontoinhaber;Max Mustermann
        Zeitraum;01.01.2024 - 31.01.2024
        Buchungstag;Verwendungszweck;Betrag
        02.01.2024;LIDL SAGT DANKE;-23,45
        03.01.2024;GEHALT JANUAR;2.500,00
        """
    )

    rows = parse_statement(csv_text)

    assert rows == [
        RawRecord(date="2024-01-02", description="LIDL SAGT DANKE", amount=Decimal("-23.45")),
        RawRecord(date="2024-01-03", description="GEHALT JANUAR", amount=Decimal("2500.00")),
    ]


def test_debit_credit_columns_snapshot():
    csv_text = _dedent(
        """
        Transaction Date,Payee,Details,Paid Out,Paid In
        2024-03-01,TESCO STORES,CARD 1234,12.50,
        2024-03-02,ACME LTD,SALARY,,1500.00
        """
    )

    rows = parse_statement(csv_text)

    assert rows == [
        RawRecord(date="2024-03-01", description="TESCO STORES CARD 1234", amount=Decimal("-12.50")),
        RawRecord(date="2024-03-02", description="ACME LTD SALARY", amount=Decimal("1500.00")),
    ]


def test_unsigned_debit_and_credit_are_taken_as_magnitudes():
    csv_text = _dedent(
        """
        Date|Memo|Debit|Credit
        2024-04-01|Rent April|-800.00|
        2024-04-02|Refund|| -20.00
        """
    )

    rows = parse_statement(csv_text)

    assert [r.amount for r in rows] == [Decimal("-800.00"), Decimal("20.00")]


def test_tab_separated_export():
    csv_text = "Date\tPayee\tAmount\n2024-02-01\tNETFLIX.COM\t-15.99\n"

    rows = parse_statement(csv_text)

    assert rows == [RawRecord(date="2024-02-01", description="NETFLIX.COM", amount=Decimal("-15.99"))]


def test_crlf_line_endings_and_blank_lines():
    csv_text = "Date,Description,Amount\r\n\r\n2024-01-01,Coffee,-3.00\r\n   \r\n2024-01-02,Tea,-2.00\r\n"

    rows = parse_statement(csv_text)

    assert [r.description for r in rows] == ["Coffee", "Tea"]


def test_rows_with_fewer_than_two_fields_are_dropped():
    csv_text = _dedent(
        """
        Buchungstag;Verwendungszweck;Betrag
        02.01.2024;LIDL SAGT DANKE;-23,45
        Endsaldo
        03.01.2024;REWE;-10,00
        """
    )

    rows = parse_statement(csv_text)

    assert [r.description for r in rows] == ["LIDL SAGT DANKE", "REWE"]


def test_rows_with_empty_date_are_dropped():
    csv_text = _dedent(
        """
        Date,Description,Amount
        ,Pending authorization,-1.00
        2024-01-02,Bakery,-4.20
        """
    )

    rows = parse_statement(csv_text)

    assert [r.description for r in rows] == ["Bakery"]


def test_missing_header_yields_empty_result():
    csv_text = _dedent(
        """
        foo,bar,baz
        1,2,3
        4,5,6
        """
    )

    assert parse_statement(csv_text) == []


def test_header_beyond_scan_window_yields_empty_result():
    preamble = "\n".join(f"note {i};info" for i in range(25))
    csv_text = preamble + "\nDate;Description;Amount\n2024-01-01;Coffee;-3,00\n"

    assert parse_statement(csv_text) == []


def test_empty_and_whitespace_input_yield_empty_result():
    assert parse_statement("") == []
    assert parse_statement(" \n\r\n\t\n") == []


def test_none_input_raises_type_error():
    with pytest.raises(TypeError):
        parse_statement(None)  # type: ignore[arg-type]


def test_description_falls_back_to_substantial_text_cell():
    csv_text = _dedent(
        """
        Date;Amount;Info
        2024-01-05;-3,50;Coffee Shop Berlin
        2024-01-06;-1,00;abc
        """
    )

    rows = parse_statement(csv_text)

    assert [r.description for r in rows] == ["Coffee Shop Berlin", UNKNOWN_DESCRIPTION]


def test_fallback_skips_numeric_looking_cells():
    csv_text = _dedent(
        """
        Date;Amount;Valuta;Info
        2024-01-05;-3,50;05.01.2024;Coffee Shop Berlin
        """
    )

    # "Valuta" maps to the date role only once; the second date-like cell is
    # never chosen as a description.
    rows = parse_statement(csv_text)

    assert rows[0].description == "Coffee Shop Berlin"


def test_description_whitespace_is_collapsed():
    csv_text = 'Date,Description,Amount\n2024-01-01,"AMAZON   MKTP    US",-9.99\n'

    rows = parse_statement(csv_text)

    assert rows[0].description == "AMAZON MKTP US"


def test_unparseable_values_degrade_to_defaults():
    csv_text = _dedent(
        """
        Date,Description,Amount
        sometime soon,Mystery charge,n/a
        """
    )

    rows = parse_statement(csv_text)

    assert rows == [RawRecord(date="sometime soon", description="Mystery charge", amount=Decimal(0))]


def test_debit_only_header_qualifies_but_amount_defaults_to_zero():
    csv_text = _dedent(
        """
        Date,Description,Withdrawal
        2024-01-01,Groceries run,12.00
        """
    )

    rows = parse_statement(csv_text)

    assert rows == [RawRecord(date="2024-01-01", description="Groceries run", amount=Decimal(0))]


def test_records_are_immutable():
    rows = parse_statement("Date,Description,Amount\n2024-01-01,Coffee,-3.00\n")

    with pytest.raises(AttributeError):
        rows[0].amount = Decimal(0)  # type: ignore[misc]
