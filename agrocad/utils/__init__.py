from .config import paths, set_paths, reset_paths, path
from .log import get_logger
from .validators_br import (
    DocumentKind,
    document_kind,
    remove_non_numeric,
    cpf_check_digits,
    cnpj_check_digits,
    validate_cpf,
    validate_cnpj,
    validate_cpf_or_cnpj,
)
from .format import format_cpf, format_cnpj, format_cpf_or_cnpj
from .masks import mask_cpf_or_cnpj

__all__ = [
    "paths", "set_paths", "reset_paths", "path",
    "get_logger",
    "DocumentKind", "document_kind", "remove_non_numeric",
    "cpf_check_digits", "cnpj_check_digits",
    "validate_cpf", "validate_cnpj", "validate_cpf_or_cnpj",
    "format_cpf", "format_cnpj", "format_cpf_or_cnpj",
    "mask_cpf_or_cnpj",
]
