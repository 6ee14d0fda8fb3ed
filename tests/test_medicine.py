import pytest

from rsnimons.medicine import Medicine, MedicineList


def _sample():
    lst = MedicineList()
    for medicine_id, name in ((3, "Paracetamol"), (1, "Amoxicillin"), (2, "Ibuprofen")):
        lst.append(Medicine(medicine_id, name))
    return lst


def test_sort_orders_by_id():
    lst = _sample()
    lst.sort()
    assert [item.medicine_id for item in lst] == [1, 2, 3]


def test_sort_is_stable_for_equal_ids():
    lst = MedicineList()
    lst.append(Medicine(2, "first"))
    lst.append(Medicine(1, "one"))
    lst.append(Medicine(2, "second"))
    lst.sort()
    assert [item.name for item in lst] == ["one", "first", "second"]


def test_index_of_finds_every_id():
    lst = _sample()
    lst.sort()
    for item in lst:
        assert lst[lst.index_of(item.medicine_id)] == item


def test_index_of_missing_is_none():
    lst = _sample()
    lst.sort()
    assert lst.index_of(99) is None
    assert MedicineList().index_of(1) is None


def test_append_full_raises():
    lst = MedicineList(capacity=1)
    lst.append(Medicine(1, "A"))
    with pytest.raises(OverflowError):
        lst.append(Medicine(2, "B"))


def test_put_by_id_places_at_slot():
    lst = MedicineList()
    lst.put_by_id(Medicine(3, "Vitamin"))
    assert len(lst) == 4
    assert lst[3].name == "Vitamin"
    assert lst[0].medicine_id == 0


def test_put_by_id_out_of_range():
    lst = MedicineList(capacity=2)
    with pytest.raises(IndexError):
        lst.put_by_id(Medicine(2, "X"))


def test_render_skips_unused_slots():
    lst = MedicineList()
    lst.put_by_id(Medicine(2, "Vitamin"))
    assert lst.render().splitlines() == ["2 Vitamin"]


def test_write_csv(tmp_path):
    lst = _sample()
    lst.sort()
    path = lst.write(tmp_path)
    assert path == tmp_path / "obat.csv"
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "obat_id;nama_obat"
    assert lines[1:] == [f"{item.medicine_id};{item.name}" for item in lst]