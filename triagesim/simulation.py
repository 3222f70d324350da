"""Discrete-event simulation of patients moving through the hospital units."""

from __future__ import annotations

import re
from pathlib import Path

from .event import Event
from .patient import Patient
from .patient_queue import PatientQueue
from .scheduler import Scheduler
from .state import State
from .unit import Unit

UNIT_COUNT = 6
_WAIT_STEP = 0.001

_UNIT_OF_QUEUE = {
    State.TRIAGE_QUEUE: 0,
    State.CARE_QUEUE: 1,
    State.MH_QUEUE: 2,
    State.TL_QUEUE: 3,
    State.EI_QUEUE: 4,
    State.IM_QUEUE: 5,
}

_SERVICE_OF_QUEUE = {
    State.TRIAGE_QUEUE: State.IN_TRIAGE,
    State.CARE_QUEUE: State.IN_CARE,
    State.MH_QUEUE: State.IN_MH,
    State.TL_QUEUE: State.IN_TL,
    State.EI_QUEUE: State.IN_EI,
    State.IM_QUEUE: State.IN_IM,
}

# service state -> (unit index, state that follows)
_AFTER_SERVICE = {
    State.IN_TRIAGE: (0, State.CARE_QUEUE),
    State.IN_CARE: (1, State.MH_QUEUE),
    State.IN_MH: (2, State.TL_QUEUE),
    State.IN_TL: (3, State.EI_QUEUE),
    State.IN_EI: (4, State.IM_QUEUE),
    State.IN_IM: (5, State.DISCHARGED),
}

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class SimulationInputError(Exception):
    """The hospital description could not be read."""


class Hospital:
    """Units, patients and the queues between them."""

    def __init__(self, units, patients):
        self.units: list[Unit] = list(units)
        if len(self.units) != UNIT_COUNT:
            raise ValueError(f"expected {UNIT_COUNT} units, got {len(self.units)}")
        self.patients: list[Patient] = list(patients)
        self.triage_queue = PatientQueue()
        # per queue state: (green, yellow, red)
        self._queues = {
            state: (PatientQueue(), PatientQueue(), PatientQueue())
            for state in _UNIT_OF_QUEUE
            if state is not State.TRIAGE_QUEUE
        }

    def queue_for(self, state: State, urgency: int) -> PatientQueue:
        """The queue a patient of ``urgency`` joins when entering ``state``."""
        if state is State.TRIAGE_QUEUE:
            return self.triage_queue
        if state not in self._queues:
            raise ValueError("Estado inválido")
        green, yellow, red = self._queues[state]
        if urgency == 0:
            return green
        if urgency == 1:
            return yellow
        return red

    def simulate(self) -> None:
        """Run every patient through the hospital until no event is left."""
        scheduler = Scheduler()
        for patient in self.patients:
            scheduler.push(Event(patient, patient.moment, State.ARRIVED))
        while not scheduler.is_empty():
            self._handle(scheduler.pop(), scheduler)

    def statistics(self) -> list[str]:
        """One report line per patient, in input order."""
        return [patient.report_line() for patient in self.patients]

    def _handle(self, event: Event, scheduler: Scheduler) -> None:
        state, patient = event.state, event.patient
        if state is State.ARRIVED:
            self._route(patient, State.TRIAGE_QUEUE, scheduler)
        elif state in _SERVICE_OF_QUEUE:
            self._attempt(patient, _SERVICE_OF_QUEUE[state], _UNIT_OF_QUEUE[state], scheduler)
        elif state in _AFTER_SERVICE:
            unit_index, following = _AFTER_SERVICE[state]
            self.units[unit_index].release(patient)
            if state is State.IN_CARE and patient.discharged:
                following = State.DISCHARGED
            self._route(patient, following, scheduler)

    def _route(self, patient: Patient, state: State, scheduler: Scheduler) -> None:
        if state is not State.DISCHARGED:
            self.queue_for(state, patient.urgency).enqueue(patient)
        patient.status = state
        scheduler.push(Event(patient, patient.moment, state))

    def _attempt(self, patient: Patient, service: State, unit_index: int,
                 scheduler: Scheduler) -> None:
        unit = self.units[unit_index]
        if not unit.is_busy():
            if self._evaluate_queues(patient):
                patient.status = service
                patient.add_time(unit.service_time, service)
            else:
                patient.add_time(_WAIT_STEP, patient.status)
        else:
            previous = unit.next_leaving()
            if previous is not None:
                patient.add_time(patient.moment.hours_between(previous.moment), patient.status)
        scheduler.push(Event(patient, patient.moment, patient.status))

    def _evaluate_queues(self, patient: Patient) -> bool:
        state = patient.status
        if state not in _UNIT_OF_QUEUE:
            return False
        unit = self.units[_UNIT_OF_QUEUE[state]]
        if state is State.TRIAGE_QUEUE:
            return unit.serve(self.triage_queue, patient)
        green, yellow, red = self._queues[state]
        if red:
            return unit.serve(red, patient)
        if yellow:
            return unit.serve(yellow, patient)
        return unit.serve(green, patient)


def _parse_unit(line: str) -> Unit:
    fields = line.split()
    try:
        service_time, attendants = float(fields[0]), int(fields[1])
    except (IndexError, ValueError) as exc:
        raise SimulationInputError(f"Linha de unidade inválida: {line!r}") from exc
    return Unit(attendants, service_time)


def _parse_patient(line: str) -> Patient:
    fields = line.split()
    try:
        values = [int(field) for field in fields[:11]]
    except ValueError as exc:
        raise SimulationInputError(f"Linha de paciente inválida: {line!r}") from exc
    if len(values) < 11 or values[1] not in (0, 1):
        raise SimulationInputError(f"Linha de paciente inválida: {line!r}")
    patient_id, discharged, *rest = values
    return Patient(patient_id, bool(discharged), *rest)


def parse_hospital(text: str) -> Hospital:
    """Build a hospital from its text description."""
    lines = iter(text.splitlines())
    units = []
    for _ in range(UNIT_COUNT):
        line = next(lines, None)
        if line is None:
            raise SimulationInputError("Erro ao ler linha das unidades.")
        units.append(_parse_unit(line))

    line = next(lines, None)
    if line is None:
        raise SimulationInputError("Erro ao ler linha com a quantidade de pacientes.")
    match = _LEADING_INT.match(line)
    if match is None:
        raise SimulationInputError(f"Quantidade de pacientes inválida: {line!r}")
    count = int(match.group(1))

    patients = []
    for _ in range(count):
        line = next(lines, None)
        if line is None:
            raise SimulationInputError("Erro ao ler linha dos pacientes.")
        patients.append(_parse_patient(line))
    return Hospital(units, patients)


def load_hospital(path) -> Hospital:
    """Read a hospital description from the file at ``path``."""
    try:
        text = Path(path).read_text()
    except OSError as exc:
        raise SimulationInputError(f"Não foi possível abrir o arquivo: {path}") from exc
    return parse_hospital(text)