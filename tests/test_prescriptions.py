import pytest

from rsnimons.prescriptions import (
    MAX_MAP_SIZE,
    MAX_OBAT_PER_PENYAKIT,
    PrescriptionEntry,
    PrescriptionMap,
)


def test_insert_and_lookup():
    prescriptions = PrescriptionMap()
    prescriptions.insert(3, 2, 1)
    prescriptions.insert(4, 2, 2)
    assert prescriptions.medicine_at(2, 1) == 3
    assert prescriptions.medicine_at(2, 2) == 4
    assert prescriptions.size == 3


def test_unknown_lookups_give_zero():
    prescriptions = PrescriptionMap()
    prescriptions.insert(3, 2, 1)
    assert prescriptions.medicine_at(2, 5) == 0
    assert prescriptions.medicine_at(7, 1) == 0
    assert prescriptions.medicine_at(-1, 1) == 0


def test_size_keeps_largest():
    prescriptions = PrescriptionMap()
    prescriptions.insert(1, 5, 1)
    prescriptions.insert(1, 2, 1)
    assert prescriptions.size == 6


def test_write_orders_by_disease_then_order(tmp_path):
    prescriptions = PrescriptionMap()
    prescriptions.insert(4, 2, 2)
    prescriptions.insert(3, 2, 1)
    prescriptions.insert(9, 1, 1)
    path = prescriptions.write(tmp_path)
    assert path == tmp_path / "obat_penyakit.csv"
    assert path.read_text().splitlines() == [
        "obat_id;penyakit_id;urutan_minum",
        "9;1;1",
        "3;2;1",
        "4;2;2",
    ]


def test_write_skips_order_zero(tmp_path):
    prescriptions = PrescriptionMap()
    prescriptions.insert(6, 1, 0)
    prescriptions.insert(7, 1, 1)
    lines = prescriptions.write(tmp_path).read_text().splitlines()
    assert lines[1:] == ["7;1;1"]


def test_render_lists_medicines():
    prescriptions = PrescriptionMap()
    prescriptions.insert(3, 2, 1)
    prescriptions.insert(0, 2, 2)
    assert prescriptions.render() == "PenyakitId: 2\n\t1. ObatId: 3"


def test_put_entry_replaces():
    prescriptions = PrescriptionMap()
    prescriptions.insert(3, 2, 1)
    prescriptions.put_entry(PrescriptionEntry(2, {1: 8, 2: 9}))
    assert prescriptions.medicine_at(2, 1) == 8
    assert prescriptions.medicine_at(2, 2) == 9
    assert [entry.disease_id for entry in prescriptions] == [2]


def test_iteration_skips_disease_zero():
    prescriptions = PrescriptionMap()
    prescriptions.insert(1, 0, 1)
    prescriptions.insert(2, 3, 1)
    assert [entry.disease_id for entry in prescriptions] == [3]


@pytest.mark.parametrize(
    "disease_id, order",
    [(MAX_MAP_SIZE, 1), (-1, 1), (1, MAX_OBAT_PER_PENYAKIT), (1, -1)],
)
def test_insert_out_of_range(disease_id, order):
    prescriptions = PrescriptionMap()
    with pytest.raises(IndexError):
        prescriptions.insert(1, disease_id, order)


def test_put_entry_rejects_bad_order():
    prescriptions = PrescriptionMap()
    with pytest.raises(IndexError):
        prescriptions.put_entry(PrescriptionEntry(1, {MAX_OBAT_PER_PENYAKIT: 1}))