from wardsim.patient import Patient


def test_defaults_start_unattended_with_no_cycles():
    patient = Patient("P00001", "Ana Souza")
    assert patient.attended is False
    assert patient.cycles_admitted == 0
    assert patient.priority == 0


def test_copy_is_equal_but_independent():
    original = Patient("P00002", "Bruno Lima", 40, "M", "00000000000", 3)
    duplicate = original.copy()
    assert duplicate == original
    assert duplicate is not original

    duplicate.attended = True
    duplicate.cycles_admitted = 5
    assert original.attended is False
    assert original.cycles_admitted == 0


def test_copy_keeps_every_field():
    original = Patient("P00003", "Carla Dias", 71, "F", "11111111111", 5, True, 2)
    duplicate = original.copy()
    assert (duplicate.id, duplicate.full_name, duplicate.age) == ("P00003", "Carla Dias", 71)
    assert (duplicate.sex, duplicate.cpf, duplicate.priority) == ("F", "11111111111", 5)
    assert duplicate.attended is True
    assert duplicate.cycles_admitted == 2