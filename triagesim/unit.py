"""A service unit of the hospital: a number of attendants sharing one service time."""

from __future__ import annotations

from .patient import Patient
from .patient_queue import PatientQueue
from .state import State

_SERVICE_OF_QUEUE = {
    State.TRIAGE_QUEUE: State.IN_TRIAGE,
    State.CARE_QUEUE: State.IN_CARE,
    State.MH_QUEUE: State.IN_MH,
    State.TL_QUEUE: State.IN_TL,
    State.EI_QUEUE: State.IN_EI,
    State.IM_QUEUE: State.IN_IM,
}


class Unit:
    """A unit that holds up to ``attendants`` patients at a time."""

    def __init__(self, attendants, service_time):
        self.attendants = attendants
        self.service_time = service_time
        self.patients: list[Patient] = []
        self._busy = False

    def occupy(self, patient: Patient) -> bool:
        """Take ``patient`` in; return False when every attendant is taken."""
        if len(self.patients) >= self.attendants:
            return False
        if patient is None:
            raise ValueError("Erro: ponteiro de paciente é nulo!")
        self.patients.append(patient)
        if len(self.patients) == self.attendants:
            self._busy = True
        return True

    def release(self, patient: Patient) -> None:
        """Let ``patient`` leave the unit, freeing an attendant."""
        if not self.patients:
            raise LookupError("Erro: Nenhum paciente na unidade para remover.")
        matches = [
            index for index, held in enumerate(self.patients)
            if held.patient_id == patient.patient_id
        ]
        if not matches:
            raise ValueError(f"Paciente {patient.patient_id} não está na unidade.")
        del self.patients[matches[-1]]
        self._busy = False

    def is_busy(self) -> bool:
        """Whether every attendant is taken."""
        return self._busy

    def next_leaving(self) -> Patient | None:
        """The patient held here whose clock is earliest, or None if empty."""
        return min(self.patients, key=lambda held: held.moment, default=None)

    def advance_status(self, patient: Patient) -> None:
        """Move a queued patient to the matching service state."""
        service = _SERVICE_OF_QUEUE.get(patient.status)
        if service is not None:
            patient.status = service

    def serve(self, queue: PatientQueue, patient: Patient) -> bool:
        """Take ``patient`` from the front of ``queue`` if the unit has room."""
        if self._busy:
            return False
        if queue.first() is not patient:
            return False
        taken = queue.dequeue()
        self.occupy(taken)
        return True