from db.models import RECORD_FIELDS, RECORD_HEADERS
from import_engine.tsv_parser import split_rows
from import_engine.row_processor import normalize_status, parse_row, row_key


HEADER = "NO\tCONTROL NUMBER\tCALL NO (082)\tCALL NO (050/060)\tACCESSION\tTITLE\tSTATUS\tSTAFF\tDATE"


def test_split_rows_separates_header_and_body():
    """The first line is the header, the rest are body rows split on tabs."""
    text = HEADER + "\n1\tC100\t610\tW 18\tA1\tAnatomy\tComplete\tALIA\t01/02/2025"
    header, body = split_rows(text)
    assert header[1] == "CONTROL NUMBER"
    assert body == [["1", "C100", "610", "W 18", "A1", "Anatomy", "Complete", "ALIA", "01/02/2025"]]


def test_split_rows_handles_crlf_bom_and_blank_lines():
    """Browser pastes arrive with \\r\\n endings and often a trailing newline."""
    raw = b"\xef\xbb\xbf" + (HEADER + "\r\n1\tC1\t\t\tA1\tT\tComplete\tALIA\tx\r\n\r\n").encode("utf-8")
    header, body = split_rows(raw)
    assert header[0] == "NO"
    assert len(body) == 1
    assert body[0][-1] == "x"


def test_split_rows_empty_input():
    assert split_rows("") is None
    assert split_rows("   \n\n") is None


def test_cells_are_not_trimmed():
    """Titles are stored exactly as pasted."""
    _, body = split_rows(HEADER + "\n1\tC1\t\t\tA1\t  Spaced title \tComplete\tALIA\td")
    assert parse_row(body[0])["title"] == "  Spaced title "


def test_completed_maps_to_complete():
    assert normalize_status("Completed") == "Complete"


def test_other_statuses_pass_through():
    """Only the exact spelling 'Completed' is rewritten."""
    assert normalize_status("Incomplete") == "Incomplete"
    assert normalize_status("Complete") == "Complete"
    assert normalize_status("completed") == "completed"
    assert normalize_status("In progress") == "In progress"
    assert normalize_status(None) is None


def test_parse_row_maps_fixed_column_order():
    cells = ["7", "C100", "616.9", "WC 100", "A1", "Tropical Medicine", "Completed", "HUSNA", "03/04/2025"]
    fields = parse_row(cells)
    assert fields == {
        "no": "7",
        "control_number": "C100",
        "call_no_082": "616.9",
        "call_no_050_060": "WC 100",
        "accession": "A1",
        "title": "Tropical Medicine",
        "status": "Complete",
        "staff": "HUSNA",
        "date": "03/04/2025",
    }
    assert row_key(fields) == ("C100", "A1")


def test_parse_row_missing_columns_become_none():
    """Short rows are kept; absent trailing columns are None."""
    fields = parse_row(["1", "C9", "x", "y", "A9"])
    assert fields["title"] is None
    assert fields["status"] is None
    assert fields["date"] is None
    assert row_key(fields) == ("C9", "A9")


def test_parse_row_ignores_surplus_columns():
    fields = parse_row(["1", "C1", "", "", "A1", "T", "Complete", "ALIA", "d", "extra", "more"])
    assert fields["date"] == "d"
    assert "extra" not in fields.values()


def test_paste_header_matches_record_layout():
    """Pasted columns line up with the record table's display headers."""
    header, _body = split_rows(HEADER + "\n1")
    assert header == [RECORD_HEADERS[f] for f in RECORD_FIELDS]
