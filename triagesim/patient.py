"""A hospital patient and the time spent at each stage."""

from __future__ import annotations

from .clock import Moment
from .state import QUEUE_STATES, State


class Patient:
    """A patient with arrival time, urgency and procedure counts."""

    def __init__(self, patient_id, discharged, year, month, day, hour,
                 urgency, mh, tl, ei, im):
        self.patient_id = patient_id
        self.discharged = bool(discharged)
        self.urgency = urgency
        self.mh = mh
        self.tl = tl
        self.ei = ei
        self.im = im
        self.arrival = Moment(year, month, day, hour)
        self.moment = self.arrival
        self.status = State.ARRIVED
        self.idle_time = 0.0
        self.service_time = 0.0
        self.total_time = 0.0

    def add_time(self, hours: float, state: State) -> None:
        """Account ``hours`` spent in ``state`` and advance the patient's clock."""
        if state in QUEUE_STATES:
            self.idle_time += hours
        elif state in (State.IN_TRIAGE, State.IN_CARE):
            self.service_time += hours
        else:
            multipliers = {
                State.IN_EI: self.ei,
                State.IN_IM: self.im,
                State.IN_MH: self.mh,
                State.IN_TL: self.tl,
            }
            if state not in multipliers:
                raise ValueError(f"Estado desconhecido: {state.value}")
            hours *= multipliers[state]
            self.service_time += hours
        self.total_time = self.service_time + self.idle_time
        self.moment = self.moment.add_hours(hours)

    def report_line(self) -> str:
        """Id, arrival, current time and the three accumulated times."""
        return (
            f"{self.patient_id}{self.arrival.format()}{self.moment.format()}"
            f" {self.total_time:.2f}  {self.service_time:.2f}  {self.idle_time:.2f}"
        )

    def heap_line(self) -> str:
        """Id, current time and state label."""
        return f"{self.patient_id} {self.moment.format()}{self.status.label()}"

    def __repr__(self):
        return f"Patient({self.patient_id}, {self.status.name}, {self.moment!r})"