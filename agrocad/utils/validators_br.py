from __future__ import annotations
import re
from enum import Enum
from typing import Sequence

CPF_LENGTH = 11
CNPJ_LENGTH = 14

_CNPJ_WEIGHTS_1 = [5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]
_CNPJ_WEIGHTS_2 = [6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]


def remove_non_numeric(value: str | None) -> str:
    """Mantém apenas os dígitos 0-9, na ordem original."""
    return re.sub(r"[^0-9]", "", value or "")


class DocumentKind(str, Enum):
    """Tipo de documento, derivado apenas da quantidade de dígitos."""
    CPF = "cpf"
    CNPJ = "cnpj"


def document_kind(digits: str) -> DocumentKind:
    """Até 11 dígitos => CPF; acima disso => CNPJ."""
    return DocumentKind.CPF if len(digits) <= CPF_LENGTH else DocumentKind.CNPJ


# ---------------- Dígitos verificadores ----------------

def _check_digit(digits: str, weights: Sequence[int]) -> int:
    s = sum(int(d) * w for d, w in zip(digits, weights))
    r = s % 11
    return 0 if r < 2 else 11 - r


def cpf_check_digits(base: str) -> str:
    """
    Calcula os 2 DVs do CPF a partir dos 9 primeiros dígitos.
    Pesos 10..2 para o 1º DV e 11..2 para o 2º.
    """
    d1 = _check_digit(base[:9], range(10, 1, -1))
    d2 = _check_digit(base[:9] + str(d1), range(11, 1, -1))
    return f"{d1}{d2}"


def cnpj_check_digits(base: str) -> str:
    """Calcula os 2 DVs do CNPJ a partir dos 12 primeiros dígitos."""
    d1 = _check_digit(base[:12], _CNPJ_WEIGHTS_1)
    d2 = _check_digit(base[:12] + str(d1), _CNPJ_WEIGHTS_2)
    return f"{d1}{d2}"


# ---------------- CPF ----------------

def validate_cpf(cpf: str | None) -> bool:
    """
    Valida CPF com cálculo de dígitos verificadores.
    Aceita com/sem máscara. Sequências repetidas (000..., 111...) são inválidas.
    """
    n = remove_non_numeric(cpf)
    if len(n) != CPF_LENGTH or n == n[0] * CPF_LENGTH:
        return False
    return n[-2:] == cpf_check_digits(n[:9])

# ---------------- CNPJ ----------------

def validate_cnpj(cnpj: str | None) -> bool:
    """
    Valida CNPJ com dígitos verificadores.
    """
    n = remove_non_numeric(cnpj)
    if len(n) != CNPJ_LENGTH or n == n[0] * CNPJ_LENGTH:
        return False
    return n[-2:] == cnpj_check_digits(n[:12])

# ---------------- CPF ou CNPJ ----------------

def validate_cpf_or_cnpj(value: str | None) -> bool:
    """Só aceita 11 (CPF) ou 14 (CNPJ) dígitos; qualquer outro tamanho é inválido."""
    n = remove_non_numeric(value)
    if len(n) not in (CPF_LENGTH, CNPJ_LENGTH):
        return False
    if document_kind(n) is DocumentKind.CPF:
        return validate_cpf(n)
    return validate_cnpj(n)
