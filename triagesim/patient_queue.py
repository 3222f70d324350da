"""First-in first-out queue of patients."""

from __future__ import annotations

from collections import deque

from .patient import Patient


class PatientQueue:
    """A FIFO queue of patients waiting for a unit."""

    def __init__(self):
        self._patients: deque[Patient] = deque()

    def enqueue(self, patient: Patient) -> None:
        """Append a patient at the back."""
        if patient is None:
            raise ValueError("Tentativa de enfileirar um paciente nulo.")
        self._patients.append(patient)

    def dequeue(self) -> Patient:
        """Remove and return the patient at the front."""
        if not self._patients:
            raise IndexError("Tentativa de desenfileirar uma fila vazia!")
        return self._patients.popleft()

    def first(self) -> Patient | None:
        """The patient at the front, or None when the queue is empty."""
        return self._patients[0] if self._patients else None

    def clear(self) -> None:
        """Remove every patient."""
        self._patients.clear()

    def __len__(self) -> int:
        return len(self._patients)

    def describe(self) -> str:
        """A listing of the queue's patients, one per line."""
        if not self._patients:
            return "A fila está vazia."
        lines = ["Conteúdo da fila:"]
        lines.extend(
            f"Paciente {position}: {patient.report_line()}"
            for position, patient in enumerate(self._patients, start=1)
        )
        return "\n".join(lines)

    def add_wait_time(self, hours: float) -> None:
        """Charge ``hours`` to every queued patient in their current state."""
        for patient in self._patients:
            patient.add_time(hours, patient.status)