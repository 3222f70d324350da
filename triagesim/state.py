"""States a patient passes through in the hospital."""

from enum import Enum


class State(Enum):
    """Stage of a patient's visit."""

    ARRIVED = 0
    TRIAGE_QUEUE = 1
    IN_TRIAGE = 2
    CARE_QUEUE = 3
    IN_CARE = 4
    MH_QUEUE = 5
    IN_MH = 6
    TL_QUEUE = 7
    IN_TL = 8
    EI_QUEUE = 9
    IN_EI = 10
    IM_QUEUE = 11
    IN_IM = 12
    DISCHARGED = 13

    def label(self) -> str:
        """Human-readable name of the state."""
        return _LABELS[self]


_LABELS = {
    State.ARRIVED: "Chegou",
    State.TRIAGE_QUEUE: "Fila de Triagem",
    State.IN_TRIAGE: "Sendo Triado",
    State.CARE_QUEUE: "Fila de Atendimento",
    State.IN_CARE: "Sendo Atendido",
    State.MH_QUEUE: "Fila MH",
    State.IN_MH: "Realizando MH",
    State.TL_QUEUE: "Fila TL",
    State.IN_TL: "Realizando TL",
    State.EI_QUEUE: "Fila EI",
    State.IN_EI: "Realizando EI",
    State.IM_QUEUE: "Fila IM",
    State.IN_IM: "Realizando IM",
    State.DISCHARGED: "Alta",
}

QUEUE_STATES = frozenset({
    State.TRIAGE_QUEUE,
    State.CARE_QUEUE,
    State.MH_QUEUE,
    State.TL_QUEUE,
    State.EI_QUEUE,
    State.IM_QUEUE,
})

SERVICE_STATES = frozenset({
    State.IN_TRIAGE,
    State.IN_CARE,
    State.IN_MH,
    State.IN_TL,
    State.IN_EI,
    State.IN_IM,
})