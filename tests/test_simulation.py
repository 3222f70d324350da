import pytest

from triagesim.simulation import (
    Hospital,
    SimulationInputError,
    load_hospital,
    parse_hospital,
)
from triagesim.state import State
from triagesim.unit import Unit

UNITS = "1.0 1\n2.0 2\n0.5 1\n0.5 1\n0.5 1\n0.5 1\n"

TWO_DISCHARGED = UNITS + "2\n1 1 2024 1 10 8 0 0 0 0 0\n2 1 2024 1 10 8 1 0 0 0 0\n"

FULL_ROUTE = UNITS + "1\n5 0 2024 1 10 8 2 2 1 1 1\n"


def make_units():
    return [Unit(1, 1.0) for _ in range(6)]


def test_parse_reads_units_and_patients():
    hospital = parse_hospital(TWO_DISCHARGED)
    assert [unit.attendants for unit in hospital.units] == [1, 2, 1, 1, 1, 1]
    assert [unit.service_time for unit in hospital.units] == [1.0, 2.0, 0.5, 0.5, 0.5, 0.5]
    assert [patient.patient_id for patient in hospital.patients] == [1, 2]
    assert hospital.patients[1].urgency == 1
    assert hospital.patients[0].discharged is True


def test_parse_missing_unit_line():
    with pytest.raises(SimulationInputError):
        parse_hospital("1.0 1\n2.0 1\n")


def test_parse_missing_count_line():
    with pytest.raises(SimulationInputError):
        parse_hospital(UNITS)


def test_parse_missing_patient_line():
    with pytest.raises(SimulationInputError):
        parse_hospital(UNITS + "2\n1 1 2024 1 10 8 0 0 0 0 0\n")


def test_parse_bad_count():
    with pytest.raises(SimulationInputError):
        parse_hospital(UNITS + "many\n")


def test_parse_bad_unit_line():
    with pytest.raises(SimulationInputError):
        parse_hospital("fast one\n" + UNITS)


def test_load_missing_file(tmp_path):
    with pytest.raises(SimulationInputError):
        load_hospital(tmp_path / "absent.txt")


def test_load_reads_file(tmp_path):
    path = tmp_path / "hospital.txt"
    path.write_text(TWO_DISCHARGED)
    hospital = load_hospital(path)
    assert len(hospital.patients) == 2


def test_hospital_requires_six_units():
    with pytest.raises(ValueError):
        Hospital([Unit(1, 1.0)], [])


def test_queue_for_by_urgency():
    hospital = Hospital(make_units(), [])
    green = hospital.queue_for(State.MH_QUEUE, 0)
    yellow = hospital.queue_for(State.MH_QUEUE, 1)
    red = hospital.queue_for(State.MH_QUEUE, 2)
    assert len({id(green), id(yellow), id(red)}) == 3
    assert hospital.queue_for(State.MH_QUEUE, 5) is red
    assert hospital.queue_for(State.MH_QUEUE, 0) is green
    assert hospital.queue_for(State.TL_QUEUE, 0) is not green


def test_queue_for_triage_ignores_urgency():
    hospital = Hospital(make_units(), [])
    assert hospital.queue_for(State.TRIAGE_QUEUE, 0) is hospital.queue_for(State.TRIAGE_QUEUE, 2)


def test_queue_for_invalid_state():
    hospital = Hospital(make_units(), [])
    with pytest.raises(ValueError):
        hospital.queue_for(State.DISCHARGED, 0)


def test_simulate_discharges_after_care():
    hospital = parse_hospital(TWO_DISCHARGED)
    hospital.simulate()
    first, second = hospital.patients
    assert first.status is State.DISCHARGED
    assert second.status is State.DISCHARGED
    assert first.idle_time == pytest.approx(0.0)
    assert first.service_time == pytest.approx(3.0)
    assert second.idle_time == pytest.approx(1.0)
    assert second.service_time == pytest.approx(first.service_time)
    assert all(not unit.patients for unit in hospital.units)


def test_simulate_clock_matches_time_spent():
    hospital = parse_hospital(TWO_DISCHARGED)
    hospital.simulate()
    for patient in hospital.patients:
        assert patient.total_time == pytest.approx(patient.service_time + patient.idle_time)
        assert patient.moment == patient.arrival.add_hours(patient.total_time)


def test_simulate_full_route():
    hospital = parse_hospital(FULL_ROUTE)
    hospital.simulate()
    (patient,) = hospital.patients
    assert patient.status is State.DISCHARGED
    assert patient.idle_time == pytest.approx(0.0)
    assert patient.service_time == pytest.approx(5.5)
    assert patient.moment == patient.arrival.add_hours(patient.total_time)
    assert all(not unit.patients for unit in hospital.units)
    assert all(not unit.is_busy() for unit in hospital.units)


def test_simulate_without_patients_leaves_state():
    hospital = Hospital(make_units(), [])
    hospital.simulate()
    assert hospital.statistics() == []


def test_statistics_one_line_per_patient():
    hospital = parse_hospital(TWO_DISCHARGED)
    hospital.simulate()
    lines = hospital.statistics()
    assert len(lines) == 2
    assert lines[0].startswith("1 ")
    assert lines[1].startswith("2 ")
    assert lines == [patient.report_line() for patient in hospital.patients]