"""Ward simulation: patients wait, are admitted and are discharged in cycles."""

from __future__ import annotations

import argparse
import random
import sys
import time
from pathlib import Path
from typing import IO

from wardsim.records import EventLog, load_patients_csv
from wardsim.structures import (
    QUEUE_CAPACITY,
    TABLE_SIZE,
    Beds,
    DischargeStack,
    PatientTable,
    WaitingQueue,
)

PATIENTS_FILE = "pacientes.csv"
LOG_FILE = "processamento.log"
CYCLE_SECONDS = 2.0
DISCHARGE_CHANCE_PERCENT = 50
HIGH_PRIORITY = 4


def run_simulation(
    patients_path: str | Path = PATIENTS_FILE,
    log_path: str | Path = LOG_FILE,
    rng: random.Random | None = None,
    cycle_seconds: float = CYCLE_SECONDS,
    out: IO[str] | None = None,
) -> DischargeStack:
    """Run the simulation to completion and return the stack of discharges."""
    rng = rng if rng is not None else random.Random()
    stream = out if out is not None else sys.stdout

    discharged = DischargeStack()
    with EventLog(log_path, out=stream) as log:
        stream.write("Simulação iniciada.\n")
        log.record("INICIO", "Simulação iniciada.")

        waiting = WaitingQueue(QUEUE_CAPACITY)
        registry = PatientTable(TABLE_SIZE)
        beds = Beds()

        load_patients_csv(patients_path, registry)
        log.record("OBS", "Pacientes carregados do arquivo CSV.")

        cycle = 1
        registry_exhausted = False
        while not registry_exhausted or not waiting.is_empty() or not beds.is_empty():
            beds.increment_cycles()
            log.record("", f"[CICLO {cycle:02d}]")

            if beds.has_discharge_ready() and rng.randrange(100) < DISCHARGE_CHANCE_PERCENT:
                patient = beds.remove_random_ready(rng)
                discharged.push(patient)
                log.record("ALTA", f"{patient.id} ({patient.full_name})")

            if not waiting.is_full() and not registry_exhausted:
                drawn = registry.draw_unattended(rng)
                if drawn is not None:
                    drawn.attended = True
                    patient = drawn.copy()
                    log.record("ESPERA", f"{patient.id} (prioridade {patient.priority})")
                    if patient.priority >= HIGH_PRIORITY:
                        waiting.push_front(patient)
                    else:
                        waiting.push_back(patient)
                else:
                    registry_exhausted = True
                    log.record("FIM", "Não há mais pacientes para entrar na fila de espera.")

            if not beds.is_full() and not waiting.is_empty():
                patient = waiting.pop_by_priority()
                patient.cycles_admitted = 0
                beds.add(patient)
                log.record("INTERNADO", f"{patient.id} (prioridade {patient.priority})")

            stream.write("\n")
            stream.flush()
            if cycle_seconds > 0:
                time.sleep(cycle_seconds)
            cycle += 1

        log.record(
            "FIM",
            "Simulação concluída. Todos os pacientes foram atendidos e altas foram processadas.",
        )

    stream.write("Simulação concluída. Log salvo.\n")
    return discharged


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description="Simulate a hospital ward.")
    parser.add_argument("--patients", default=PATIENTS_FILE, help="patient CSV file")
    parser.add_argument("--log", default=LOG_FILE, help="log file to write")
    parser.add_argument(
        "--cycle-seconds", type=float, default=CYCLE_SECONDS, help="pause between cycles"
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    try:
        run_simulation(
            args.patients,
            args.log,
            rng=random.Random(args.seed),
            cycle_seconds=args.cycle_seconds,
        )
    except OSError as error:
        print(f"Erro ao abrir o arquivo {error.filename}.", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())