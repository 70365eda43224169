from __future__ import annotations
from typing import Dict

from .validators_br import CNPJ_LENGTH, CPF_LENGTH, DocumentKind, document_kind, remove_non_numeric

# posição do dígito (0-based) -> separador inserido antes dele
_SEPARATORS: Dict[DocumentKind, Dict[int, str]] = {
    DocumentKind.CPF: {3: ".", 6: ".", 9: "-"},
    DocumentKind.CNPJ: {2: ".", 5: ".", 8: "/", 12: "-"},
}

_MAX_DIGITS = {DocumentKind.CPF: CPF_LENGTH, DocumentKind.CNPJ: CNPJ_LENGTH}


def mask_cpf_or_cnpj(value: str | None) -> str:
    """
    Aplica máscara de CPF/CNPJ enquanto digita.

    O tipo é recalculado a cada chamada pela quantidade de dígitos; o excedente
    (além de 11 para CPF ou 14 para CNPJ) é descartado. Um separador só aparece
    quando já existe um dígito depois dele: '1234' -> '123.4', '123' -> '123'.
    """
    digits = remove_non_numeric(value)
    kind = document_kind(digits)
    digits = digits[:_MAX_DIGITS[kind]]
    seps = _SEPARATORS[kind]

    out = []
    for i, d in enumerate(digits):
        if i in seps:
            out.append(seps[i])
        out.append(d)
    return "".join(out)
