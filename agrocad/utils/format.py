from __future__ import annotations

from .validators_br import CNPJ_LENGTH, CPF_LENGTH, DocumentKind, document_kind, remove_non_numeric


def format_cpf(cpf: str) -> str:
    """
    Formata CPF: 000.000.000-00
    Se não houver exatamente 11 dígitos, devolve a entrada sem alteração.
    """
    n = remove_non_numeric(cpf)
    if len(n) != CPF_LENGTH:
        return cpf
    return f"{n[0:3]}.{n[3:6]}.{n[6:9]}-{n[9:11]}"


def format_cnpj(cnpj: str) -> str:
    """
    Formata CNPJ: 00.000.000/0000-00
    Se não houver exatamente 14 dígitos, devolve a entrada sem alteração.
    """
    n = remove_non_numeric(cnpj)
    if len(n) != CNPJ_LENGTH:
        return cnpj
    return f"{n[0:2]}.{n[2:5]}.{n[5:8]}/{n[8:12]}-{n[12:14]}"


def format_cpf_or_cnpj(value: str) -> str:
    """
    Formata CPF ou CNPJ conforme a quantidade de dígitos.
    Só é previsível para 11 ou 14 dígitos; nos demais casos a entrada volta intacta.
    """
    if document_kind(remove_non_numeric(value)) is DocumentKind.CPF:
        return format_cpf(value)
    return format_cnpj(value)
