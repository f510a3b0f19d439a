# wardsim

wardsim is a small simulation of a hospital ward that runs in cycles.

Patients are read from a CSV file, with fields separated by semicolons, into a hash table. Each cycle does the following, in order:

1. Every patient in a bed has their cycle count increased by one.
2. If some patient has spent at least one cycle in a bed, there is a 50% chance that a random one of those patients is discharged. A discharged patient is pushed onto the discharge stack.
3. If the waiting queue has room (capacity 20) and patients remain in the table, a random patient who has not yet been attended is drawn and marked as attended. A patient with priority 4 or higher joins the front of the queue. Anyone with a lower priority joins the back. When no such patient remains, drawing stops for the rest of the run.
4. If a bed is free (there are 10 beds), the end of the queue with the higher priority is admitted. On a tie, the front is admitted.

The simulation ends when every patient has been drawn, the queue is empty and every bed is free. Each event is printed to standard output and also written to a log file.

## Installing

```
pip install .
```

## Running

```
wardsim
```

By default this reads `pacientes.csv` from the current directory and writes `processamento.log`. It pauses two seconds between cycles.

Options:

- `--patients PATH`: the patient CSV file to read.
- `--log PATH`: the log file to write.
- `--cycle-seconds N`: the pause between cycles. Use `0` for no pause.
- `--seed N`: a seed for the random number generator, so that runs can be repeated.

If a file cannot be opened, the command prints an error message and exits with status 1.

The CSV file must be UTF-8. Its first line is a header and is skipped. Blank lines are ignored. Every other row has this form:

```
id;full name;age;sex;cpf;priority;attended
```

For example:

```
P00001;Maria Exemplo;42;F;X;5;0
```

Numeric fields are read leniently: a field with no leading integer counts as 0. A non-zero `attended` value marks a patient as already seen, and that patient is never drawn.

## Log format

Each line holds the event name, left-aligned in 16 columns, then ` - ` and the details. Examples are `ESPERA`, `INTERNADO`, `ALTA` and `FIM`. The cycle markers, such as `[CICLO 01]`, are written without an event name.

## Using it from Python

```python
import random
from wardsim.simulation import run_simulation

discharged = run_simulation(
    "pacientes.csv",
    "processamento.log",
    rng=random.Random(1),
    cycle_seconds=0,
)
for patient in discharged:  # most recent discharge first
    print(patient.id, patient.full_name)
```

`run_simulation` also takes `out`, a text stream that receives the console output in place of standard output.

The package contains these modules:

- `wardsim.patient`: the `Patient` dataclass.
- `wardsim.structures`:
  - `DischargeStack`;
  - `WaitingQueue`, with `push_front`, `push_back`, `pop_front`, `pop_back` and `pop_by_priority`;
  - `PatientTable`, a chained hash table that uses `djb2_hash`, with `insert`, `unattended`, `draw_unattended` and `dump`;
  - `Beds`, with `add`, `increment_cycles`, `has_discharge_ready`, `remove_random` and `remove_random_ready`;
  - the errors `BedsFullError`, `BedsEmptyError` and `NoDischargeReadyError`. All three derive from `StructureError`.
- `wardsim.records`:
  - `load_patients_csv`, which returns the number of patients loaded;
  - `format_entry`;
  - `EventLog`, a context manager that writes entries to a stream and, if given a path, to a file.
- `wardsim.simulation`: `run_simulation` and `main`.

## Tests

```
pip install .[test]
pytest
```