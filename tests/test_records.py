import io

import pytest

from wardsim.records import EventLog, format_entry, load_patients_csv
from wardsim.structures import PatientTable

HEADER = "id;nome;idade;sexo;cpf;prioridade;atendido\n"


def _write(tmp_path, body):
    path = tmp_path / "pacientes.csv"
    path.write_text(HEADER + body, encoding="utf-8")
    return path


def test_load_parses_all_fields(tmp_path):
    path = _write(tmp_path, "P00001;Ana Souza;34;F;00000000001;4;0\n")
    table = PatientTable()
    assert load_patients_csv(path, table) == 1
    (patient,) = list(table)
    assert patient.id == "P00001"
    assert patient.full_name == "Ana Souza"
    assert patient.age == 34
    assert patient.sex == "F"
    assert patient.cpf == "00000000001"
    assert patient.priority == 4
    assert patient.attended is False


def test_load_attended_flag_and_count(tmp_path):
    path = _write(
        tmp_path,
        "P00001;Ana;30;F;00000000001;2;1\nP00002;Bruno;40;M;00000000002;5;0\n",
    )
    table = PatientTable()
    assert load_patients_csv(path, table) == 2
    assert len(table) == 2
    assert [p.id for p in table.unattended()] == ["P00002"]


def test_empty_fields_are_collapsed(tmp_path):
    path = _write(tmp_path, "P00003;;Carla;25;F;00000000003;3;0\n")
    table = PatientTable()
    load_patients_csv(path, table)
    (patient,) = list(table)
    assert patient.full_name == "Carla"
    assert patient.age == 25
    assert patient.priority == 3


def test_header_and_blank_lines_skipped(tmp_path):
    path = _write(tmp_path, "\nP00004;Davi;50;M;00000000004;1;0\n\n")
    table = PatientTable()
    assert load_patients_csv(path, table) == 1
    assert [p.id for p in table] == ["P00004"]


def test_non_numeric_fields_read_as_zero(tmp_path):
    path = _write(tmp_path, "P00005;Eva;abc;F;00000000005;x;y\n")
    table = PatientTable()
    load_patients_csv(path, table)
    (patient,) = list(table)
    assert patient.age == 0
    assert patient.priority == 0
    assert patient.attended is False


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_patients_csv(tmp_path / "absent.csv", PatientTable())


def test_format_entry_pads_event():
    assert format_entry("ALTA", "x") == "ALTA             - x\n"


def test_format_entry_without_event():
    assert format_entry("", "[CICLO 01]") == "[CICLO 01]\n"


def test_format_entry_long_event_not_truncated():
    line = format_entry("A" * 20, "detail")
    assert line.startswith("A" * 20 + " - ")
    assert line.endswith("detail\n")


def test_event_log_writes_file_and_stream(tmp_path):
    log_path = tmp_path / "run.log"
    out = io.StringIO()
    with EventLog(log_path, out=out) as log:
        first = log.record("INICIO", "start")
        second = log.record("", "plain")
    assert first == format_entry("INICIO", "start")
    assert out.getvalue() == first + second
    assert log_path.read_text(encoding="utf-8") == first + second


def test_event_log_after_close_only_prints(tmp_path):
    log_path = tmp_path / "run.log"
    out = io.StringIO()
    log = EventLog(log_path, out=out)
    log.record("A", "one")
    log.close()
    log.record("B", "two")
    assert log_path.read_text(encoding="utf-8") == format_entry("A", "one")
    assert out.getvalue() == format_entry("A", "one") + format_entry("B", "two")


def test_event_log_without_file_uses_stdout(capsys):
    log = EventLog()
    log.record("OBS", "hello")
    assert capsys.readouterr().out == format_entry("OBS", "hello")