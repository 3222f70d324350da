# triagesim

triagesim is a discrete-event simulation of patients moving through a hospital
emergency department. A patient arrives and goes through triage and then
medical care. After care, a patient marked for discharge leaves. Every other
patient goes through the procedures MH, TL, EI and IM in that order and is then
discharged.

Each stage has one service unit (`triagesim.unit.Unit`). A unit has a fixed
number of attendants and a fixed service time in hours. Triage has a single
queue. Each later stage has three queues, one per urgency, and serves red
before yellow before green.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Input format

The input is a plain text file. It starts with six unit lines, one each for
triage, care, MH, TL, EI and IM. Each unit line holds the service time in hours
followed by the number of attendants:

```
0.2 2
1.0 3
0.5 1
0.3 2
0.4 1
0.6 1
```

The next line gives the number of patients. One line per patient follows:

```
id discharged year month day hour urgency mh tl ei im
```

- `discharged` must be `0` or `1`. A `1` means the patient leaves right after
  medical care.
- `urgency` is `0` for green and `1` for yellow. Any other value is treated as
  red.
- `mh`, `tl`, `ei` and `im` multiply the service time of the matching
  procedure unit.

Arrival times are read as local time.

If a line is missing or malformed, `triagesim.simulation.SimulationInputError`
is raised. The same error is raised if the file cannot be opened.

## Command line

```
triagesim hospital.txt
```

This loads the file and runs the simulation once. It then times a second call
to `simulate` on the same hospital and prints
`Tempo de execução: <seconds> segundos`. If no file name is given, or the file
cannot be read, it writes a message to standard error and exits with status 1.

```
triagesim-recency < addresses.txt
```

This reads hexadecimal addresses from standard input, one per line. Each
address is turned into a 4-byte word number counted from the first address.
The word is then moved to the front of a 1000-entry move-to-front list
(`triagesim.recency.RecencyList`). For each address the command prints the
word's former 1-based position in that list, or `0` if the word was not there.
`triagesim.recency.distances` yields the same numbers from any iterable of
lines.

## Library use

```python
from triagesim.simulation import load_hospital

hospital = load_hospital("hospital.txt")
hospital.simulate()
for line in hospital.statistics():
    print(line)
```

`parse_hospital(text)` builds a `Hospital` from a string instead of a file.
`Hospital.queue_for(state, urgency)` returns the queue that a patient joins on
entering a queue state.

`statistics()` returns one line per patient, in input order. Each line gives:

- the patient id
- the arrival time
- the time the patient's clock reached
- the total hours
- the in-service hours
- the idle hours

The building blocks are available on their own:

- `triagesim.clock.Moment`: local-time moments with hour arithmetic
- `triagesim.state.State`: the stages of a visit
- `triagesim.patient.Patient`
- `triagesim.event.Event`
- `triagesim.patient_queue.PatientQueue`
- `triagesim.scheduler.Scheduler`: pending events, ordered by time, then
  service states first, then patient id
- `triagesim.unit.Unit`

## What it does not do

The `triagesim` command does not print per-patient statistics. Call
`Hospital.statistics()` from Python to get them.