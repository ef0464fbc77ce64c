from import_engine.duplicates import find_duplicates, EXISTING, BATCH


def test_no_collisions():
    dupes = find_duplicates(
        [("C1", "A1")],
        [(2, ("C2", "A2")), (3, ("C3", "A3"))],
    )
    assert dupes == []


def test_collision_with_existing_record():
    dupes = find_duplicates(
        [("C100", "A1"), ("C200", "A2")],
        [(2, ("C100", "A1")), (3, ("C300", "A3"))],
    )
    assert len(dupes) == 1
    assert dupes[0]["row"] == 2
    assert dupes[0]["against"] == EXISTING
    assert dupes[0]["first_row"] is None


def test_collision_within_batch():
    """Two pasted rows with the same pair collide even if storage is empty."""
    dupes = find_duplicates(
        [],
        [(2, ("C1", "A1")), (3, ("C2", "A2")), (4, ("C1", "A1"))],
    )
    assert dupes == [{
        "row": 4, "control_number": "C1", "accession": "A1",
        "against": BATCH, "first_row": 2,
    }]


def test_same_control_number_different_accession_is_fine():
    """Only the pair must be unique; either half may repeat."""
    dupes = find_duplicates(
        [("C1", "A1")],
        [(2, ("C1", "A2")), (3, ("C2", "A1"))],
    )
    assert dupes == []


def test_pairs_are_not_compared_by_concatenation():
    """("C1", "00A") and ("C10", "0A") concatenate to the same text but differ."""
    dupes = find_duplicates([("C1", "00A")], [(2, ("C10", "0A"))])
    assert dupes == []
