from __future__ import annotations
import random

from docbr.document import DocumentKind
from docbr.generator import complete, generate, generate_base, generate_cnpj, generate_cpf
from docbr.validator import validate, validate_cnpj, validate_cpf


def test_cpf_base_has_nine_digits(rng):
    base = generate_base(DocumentKind.CPF, rng)
    assert len(base) == 9 and base.isdigit()


def test_cnpj_base_ends_with_head_office_branch(rng):
    base = generate_base(DocumentKind.CNPJ, rng)
    assert len(base) == 12 and base.isdigit()
    assert base.endswith("0001")


def test_generated_numbers_validate(rng):
    for _ in range(200):
        cpf = generate_cpf(rng)
        cnpj = generate_cnpj(rng)
        assert len(cpf) == 11 and cpf.isdigit()
        assert len(cnpj) == 14 and cnpj.isdigit()
        assert validate_cpf(cpf)
        assert validate_cnpj(cnpj)
        assert cnpj[8:12] == "0001"


def test_default_generator_works_without_rng():
    assert validate_cpf(generate_cpf())
    assert validate_cnpj(generate_cnpj())


def test_same_seed_same_number():
    assert generate_cpf(random.Random(7)) == generate_cpf(random.Random(7))
    assert generate(DocumentKind.CNPJ, random.Random(7)) == generate_cnpj(random.Random(7))


def test_complete_is_deterministic_for_a_base():
    assert complete("529982247", DocumentKind.CPF) == "52998224725"
    assert complete("112223330001", DocumentKind.CNPJ) == "11222333000181"


def test_mutated_base_gives_different_number(rng):
    for _ in range(100):
        cpf = generate_cpf(rng)
        pos = rng.randrange(9)
        new_digit = str((int(cpf[pos]) + rng.randint(1, 9)) % 10)
        mutated_base = cpf[:pos] + new_digit + cpf[pos + 1:9]
        assert complete(mutated_base, DocumentKind.CPF) != cpf


def test_single_digit_mutation_mostly_invalid(rng):
    # colisões são possíveis (resto 0 e 1 dão o mesmo dígito), mas raras
    still_valid = 0
    total = 300
    for _ in range(total):
        kind = rng.choice(list(DocumentKind))
        number = generate(kind, rng)
        pos = rng.randrange(kind.base_length)
        new_digit = str((int(number[pos]) + rng.randint(1, 9)) % 10)
        mutated = number[:pos] + new_digit + number[pos + 1:]
        if validate(mutated, kind):
            still_valid += 1
    assert still_valid < total * 0.1
