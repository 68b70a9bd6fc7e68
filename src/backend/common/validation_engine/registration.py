"""The client registration form: personal identity fields followed by bank account fields.

Messages are the Portuguese texts the form shows next to each input.
"""

from __future__ import annotations

from typing import List, Optional

from .config import RegistrationSchemaConfig
from .models import AccountType, FieldKind
from .registry import FieldSpec, Schema, define
from .rule import FieldRule
from .rules import (
    CalendarDate,
    DigitsOnly,
    Email,
    ExactLength,
    IsoDateFormat,
    LettersAndSpaces,
    MaxLength,
    MinLength,
    OneOf,
    Required,
    YearAfterUntilToday,
)

NAME = "name"
CPF = "cpf"
RG = "rg"
BIRTH_DATE = "birth_date"
PHONE = "phone"
EMAIL = "email"
ADDRESS = "address"
COMPLEMENT = "complement"
BANK_NAME = "bank_name"
BRANCH_CODE = "branch_code"
ACCOUNT_NUMBER = "account_number"
ACCOUNT_CHECK_DIGIT = "account_check_digit"
ACCOUNT_TYPE = "account_type"


def build_registration_schema(config: Optional[RegistrationSchemaConfig] = None) -> Schema:
    cfg = config or RegistrationSchemaConfig()

    fields: List[FieldSpec] = [
        FieldSpec(NAME, label="Nome", rules=(Required("Nome é obrigatório"),)),
        FieldSpec(
            CPF,
            label="CPF",
            rules=_identifier("CPF", "CPF é obrigatório", cfg.cpf_length, f"CPF deve ter exatamente {cfg.cpf_length} caracteres", cfg),
        ),
        FieldSpec(
            RG,
            label="RG",
            rules=_identifier("RG", "RG é obrigatório", cfg.rg_length, f"RG deve ter exatamente {cfg.rg_length} caracteres", cfg),
        ),
        FieldSpec(
            BIRTH_DATE,
            kind=FieldKind.DATE,
            label="Data de Nascimento",
            rules=(
                Required("Data de nascimento é obrigatória"),
                IsoDateFormat("Data deve estar no formato AAAA-MM-DD"),
                CalendarDate("Data de nascimento inválida"),
            ),
            refinements=(
                YearAfterUntilToday(
                    cfg.min_birth_year,
                    f"Data de nascimento deve ser posterior a {cfg.min_birth_year} e não pode estar no futuro",
                ),
            ),
            type_message="Data de nascimento inválida",
        ),
        FieldSpec(
            PHONE,
            label="Telefone",
            rules=(
                Required("Telefone é obrigatório"),
                MinLength(cfg.phone_min_length, f"Telefone deve ter no mínimo {cfg.phone_min_length} caracteres"),
            ),
        ),
        FieldSpec(EMAIL, label="Email", rules=(Required("Email é obrigatório"), Email("Email inválido"))),
        FieldSpec(ADDRESS, label="Endereço", rules=_address_rules(cfg)),
    ]
    if cfg.has_complement:
        fields.append(FieldSpec(COMPLEMENT, label="Complemento", optional=True))

    fields.extend(
        [
            FieldSpec(
                BANK_NAME,
                label="Banco",
                rules=(Required("Banco é obrigatório"), OneOf(cfg.banks, "Banco inválido")),
            ),
            FieldSpec(
                BRANCH_CODE,
                label="Agência",
                rules=_identifier(
                    "Agência",
                    "Agência é obrigatória",
                    cfg.branch_length,
                    f"Agência deve ter exatamente {cfg.branch_length} dígitos",
                    cfg,
                ),
            ),
            FieldSpec(
                ACCOUNT_NUMBER,
                label="Conta",
                rules=_identifier(
                    "Conta",
                    "Conta é obrigatória",
                    cfg.account_length,
                    f"Conta deve ter exatamente {cfg.account_length} dígitos",
                    cfg,
                ),
            ),
        ]
    )
    if cfg.has_check_digit:
        fields.append(
            FieldSpec(
                ACCOUNT_CHECK_DIGIT,
                label="Dígito",
                rules=_identifier(
                    "Dígito da conta",
                    "Dígito da conta é obrigatório",
                    1,
                    "Dígito da conta deve ter exatamente 1 dígito",
                    cfg,
                ),
            )
        )
    fields.append(
        FieldSpec(
            ACCOUNT_TYPE,
            kind=FieldKind.CHOICE,
            label="Tipo de Conta",
            choices=AccountType,
            rules=(
                Required("Tipo de conta é obrigatório"),
                OneOf([t.value for t in AccountType], "Tipo de conta inválido"),
            ),
            type_message="Tipo de conta inválido",
        )
    )
    return define(fields)


def _identifier(
    label: str,
    required_message: str,
    length: int,
    length_message: str,
    cfg: RegistrationSchemaConfig,
) -> tuple[FieldRule, ...]:
    rules: List[FieldRule] = [Required(required_message), ExactLength(length, length_message)]
    if cfg.numeric_identifiers:
        rules.append(DigitsOnly(f"{label} deve conter apenas dígitos"))
    return tuple(rules)


def _address_rules(cfg: RegistrationSchemaConfig) -> tuple[FieldRule, ...]:
    rules: List[FieldRule] = [
        Required("Endereço é obrigatório"),
        MaxLength(cfg.address_max_length, f"Endereço deve ter no máximo {cfg.address_max_length} caracteres"),
    ]
    if cfg.address_letters_only:
        rules.append(LettersAndSpaces("Endereço deve conter apenas letras e espaços"))
    return tuple(rules)
