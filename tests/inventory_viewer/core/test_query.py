from inventory_viewer.core.query import Query, QueryProfile, is_unconstrained


def test_query_to_from_dict_roundtrip():
    q = Query(search="kopi", selections={"DIVISI": "Minuman", "SUPPLIER": None})

    rebuilt = Query.from_dict(q.to_dict())

    assert rebuilt == q


def test_from_dict_treats_empty_string_as_unconstrained():
    q = Query.from_dict({"search": None, "selections": {"DIVISI": "", "KATEGORI": "Snack"}})

    assert q.search == ""
    assert q.selections == {"DIVISI": None, "KATEGORI": "Snack"}
    assert q.active_selections() == {"KATEGORI": "Snack"}


def test_is_empty():
    assert Query().is_empty
    assert Query(selections={"DIVISI": None}).is_empty
    assert not Query(search="x").is_empty
    assert not Query(selections={"DIVISI": "Makanan"}).is_empty


def test_with_selection_and_cleared_do_not_mutate():
    base = Query(selections={"DIVISI": None, "SUPPLIER": None})

    q = base.with_search("teh").with_selection("DIVISI", "Minuman")

    assert base.search == ""
    assert base.selections["DIVISI"] is None
    assert q.active_selections() == {"DIVISI": "Minuman"}

    cleared = q.cleared()
    assert cleared.search == ""
    assert cleared.selections == {"DIVISI": None, "SUPPLIER": None}


def test_unconstrained_sentinels():
    assert is_unconstrained(None)
    assert is_unconstrained("")
    assert not is_unconstrained(" ")


def test_default_profile_fields():
    profile = QueryProfile()

    assert profile.search_fields == ("BARCODE", "NAMA PRODUK")
    assert profile.filter_fields == ("DIVISI", "KATEGORI", "SUPPLIER")
