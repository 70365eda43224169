from __future__ import annotations
from typing import Any
from uuid import uuid4

from pydantic import BaseModel, Field, ConfigDict, field_validator

from agrocad.utils.validators_br import DocumentKind, document_kind, remove_non_numeric, validate_cpf_or_cnpj
from agrocad.utils.format import format_cpf_or_cnpj

NAME_MIN = 3
NAME_MAX = 100


def _text(v: Any) -> str:
    # None e NaN (v != v) contam como vazio
    if v is None or v != v:
        return ""
    return str(v).strip()


class ProducerForm(BaseModel):
    """
    Dados de criação/edição de um produtor rural.
    - cpf_cnpj: obrigatório, precisa ser CPF ou CNPJ válido; guardado só com dígitos.
    - name: 3 a 100 caracteres (após strip).
    """
    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    cpf_cnpj: str = Field(..., description="CPF (11) ou CNPJ (14), com ou sem máscara")
    name: str = Field(..., description="Nome do produtor")

    @field_validator("cpf_cnpj", mode="before")
    @classmethod
    def _check_document(cls, v: Any):
        s = _text(v)
        if not s:
            raise ValueError("CPF/CNPJ é obrigatório")
        if not validate_cpf_or_cnpj(s):
            raise ValueError("CPF/CNPJ inválido")
        return remove_non_numeric(s)

    @field_validator("name", mode="before")
    @classmethod
    def _check_name(cls, v: Any):
        s = _text(v)
        if len(s) < NAME_MIN:
            raise ValueError(f"Nome deve ter pelo menos {NAME_MIN} caracteres")
        if len(s) > NAME_MAX:
            raise ValueError("Nome muito longo")
        return s


class Producer(ProducerForm):
    """Produtor já cadastrado (o que a listagem mostra)."""

    id: str = Field(default_factory=lambda: uuid4().hex)

    @property
    def document_kind(self) -> DocumentKind:
        return document_kind(self.cpf_cnpj)

    @property
    def cpf_cnpj_formatted(self) -> str:
        return format_cpf_or_cnpj(self.cpf_cnpj)

    @classmethod
    def from_form(cls, form: ProducerForm, id: str | None = None) -> "Producer":
        data = form.model_dump()
        if id:
            data["id"] = id
        return cls(**data)
