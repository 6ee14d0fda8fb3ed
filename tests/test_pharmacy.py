import pytest

from rsnimons.disease import Disease
from rsnimons.medicine import Medicine
from rsnimons.pharmacy import Session, minum_obat, minum_penawar
from rsnimons.storage import Hospital
from rsnimons.user import User

PATIENT = 5


def _reader(*answers):
    items = iter(answers)
    return lambda prompt: next(items)


def _hospital(lives=3):
    hospital = Hospital()
    hospital.users.append(User(1, "manager", "password", "manager"))
    hospital.users.append(
        User(PATIENT, "pasien", "password", "pasien", "Flu", lives=lives)
    )
    hospital.diseases.append(Disease(1, "Flu"))
    hospital.medicines.append(Medicine(10, "Paracetamol"))
    hospital.medicines.append(Medicine(11, "Vitamin"))
    hospital.prescriptions.insert(10, 1, 1)
    hospital.prescriptions.insert(11, 1, 2)
    config = hospital.config
    config.inventory.set(PATIENT, 0, 10)
    config.inventory.set(PATIENT, 1, 11)
    config.medicine_owners = 1
    plan = config.floor_plan
    plan.rows, plan.cols = 1, 1
    room = plan.room(0, 0)
    room.doctor_id = 1
    room.queue.enqueue(PATIENT)
    return hospital


def _row(hospital):
    return [hospital.config.inventory.get(PATIENT, c) for c in range(3)]


def _patient(hospital):
    return hospital.users[hospital.users.index_of_id(PATIENT)]


def test_logout_resets_session():
    session = Session(3, PATIENT)
    session.logout()
    assert (session.state, session.user_id) == (0, -1)


def test_correct_medicine_keeps_lives():
    hospital = _hospital()
    drunk = minum_obat(hospital, Session(3, PATIENT), _reader("1"))
    assert drunk == 10
    assert hospital.config.stomachs[PATIENT].peek() == 10
    assert hospital.config.stomach_count == 1
    assert _row(hospital) == [11, 0, 0]
    assert _patient(hospital).lives == 3
    assert hospital.config.medicine_owners == 1


def test_wrong_order_costs_a_life(capsys):
    hospital = _hospital()
    drunk = minum_obat(hospital, Session(3, PATIENT), _reader("2"))
    assert drunk == 11
    assert _patient(hospital).lives == 2
    assert _row(hospital) == [10, 0, 0]
    assert "Kamu salah minum obat!" in capsys.readouterr().out


def test_full_course_empties_inventory():
    hospital = _hospital()
    session = Session(3, PATIENT)
    minum_obat(hospital, session, _reader("1"))
    minum_obat(hospital, session, _reader("1"))
    assert list(hospital.config.stomachs[PATIENT]) == [11, 10]
    assert hospital.config.inventory.is_row_empty(PATIENT)
    assert hospital.config.medicine_owners == 0
    assert _patient(hospital).lives == 3


@pytest.mark.parametrize("answer", ["0", "3", "abc", "-1"])
def test_invalid_choice_changes_nothing(answer):
    hospital = _hospital()
    assert minum_obat(hospital, Session(3, PATIENT), _reader(answer)) is None
    assert _row(hospital) == [10, 11, 0]
    assert hospital.config.stomachs[PATIENT].is_empty()


def test_no_medicine(capsys):
    hospital = _hospital()
    hospital.config.inventory.set(PATIENT, 0, 0)
    hospital.config.inventory.set(PATIENT, 1, 0)
    assert minum_obat(hospital, Session(3, PATIENT), _reader("1")) is None
    assert "Kamu tidak memiliki obat!" in capsys.readouterr().out


def test_last_life_removes_patient(capsys):
    hospital = _hospital(lives=1)
    session = Session(3, PATIENT)
    minum_obat(hospital, session, _reader("2"))
    assert hospital.users.index_of_id(PATIENT) is None
    assert (session.state, session.user_id) == (0, -1)
    assert hospital.config.floor_plan.room(0, 0).queue.is_empty()
    assert hospital.config.inventory.is_row_empty(PATIENT)
    assert hospital.config.stomachs[PATIENT].is_empty()
    assert hospital.config.stomach_count == 0
    assert hospital.config.medicine_owners == 0
    assert "Kamu dinyatakan ded." in capsys.readouterr().out


def test_penawar_on_empty_stomach(capsys):
    hospital = _hospital()
    assert minum_penawar(hospital, PATIENT) is None
    assert "Perut kosong!!" in capsys.readouterr().out


def test_penawar_returns_medicine_to_inventory():
    hospital = _hospital()
    minum_obat(hospital, Session(3, PATIENT), _reader("1"))
    assert minum_penawar(hospital, PATIENT) == 10
    assert _row(hospital) == [11, 10, 0]
    assert hospital.config.stomachs[PATIENT].is_empty()
    assert hospital.config.stomach_count == 0


def test_penawar_restores_owner_count():
    hospital = _hospital()
    session = Session(3, PATIENT)
    minum_obat(hospital, session, _reader("1"))
    minum_obat(hospital, session, _reader("1"))
    assert hospital.config.medicine_owners == 0
    assert minum_penawar(hospital, PATIENT) == 11
    assert hospital.config.medicine_owners == 1
    assert hospital.config.stomach_count == 1
    assert _row(hospital) == [11, 0, 0]