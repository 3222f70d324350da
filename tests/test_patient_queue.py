import pytest

from triagesim.patient import Patient
from triagesim.patient_queue import PatientQueue
from triagesim.state import State


def _patient(pid):
    return Patient(pid, False, 2024, 1, 1, 0, 0, 0, 0, 0, 0)


def test_fifo_order():
    queue = PatientQueue()
    patients = [_patient(i) for i in range(4)]
    for p in patients:
        queue.enqueue(p)
    assert len(queue) == len(patients)
    assert [queue.dequeue() for _ in patients] == patients
    assert len(queue) == 0


def test_first_does_not_remove():
    queue = PatientQueue()
    a, b = _patient(1), _patient(2)
    queue.enqueue(a)
    queue.enqueue(b)
    assert queue.first() is a
    assert len(queue) == 2


def test_empty_queue():
    queue = PatientQueue()
    assert queue.first() is None
    with pytest.raises(IndexError):
        queue.dequeue()


def test_enqueue_none_rejected():
    queue = PatientQueue()
    with pytest.raises(ValueError):
        queue.enqueue(None)
    assert len(queue) == 0


def test_clear():
    queue = PatientQueue()
    queue.enqueue(_patient(1))
    queue.enqueue(_patient(2))
    queue.clear()
    assert len(queue) == 0
    assert queue.first() is None


def test_describe_empty():
    assert PatientQueue().describe() == "A fila está vazia."


def test_describe_contents():
    queue = PatientQueue()
    a, b = _patient(1), _patient(2)
    queue.enqueue(a)
    queue.enqueue(b)
    lines = queue.describe().split("\n")
    assert lines == [
        "Conteúdo da fila:",
        "Paciente 1: " + a.report_line(),
        "Paciente 2: " + b.report_line(),
    ]


def test_add_wait_time_charges_every_patient():
    queue = PatientQueue()
    patients = [_patient(i) for i in range(3)]
    for p in patients:
        p.status = State.TRIAGE_QUEUE
        queue.enqueue(p)
    queue.add_wait_time(0.75)
    assert all(p.idle_time == 0.75 for p in patients)
    assert all(p.arrival.hours_between(p.moment) == pytest.approx(0.75) for p in patients)


def test_add_wait_time_on_empty_queue_is_harmless():
    queue = PatientQueue()
    queue.add_wait_time(1.0)
    assert len(queue) == 0