from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


load_dotenv()

DEFAULT_BANKS: Tuple[str, ...] = ("Banco do Brasil", "Bradesco", "Caixa", "Itaú", "Nubank")
ENV_PREFIX = "REGISTRATION_"


class RegistrationSchemaConfig(BaseModel):
    """Knobs that distinguish the registration form variants.

    Accepts camelCase (``cpfLength``, ``hasCheckDigit``) as well as snake_case keys.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )

    cpf_length: int = Field(default=11, ge=1)
    rg_length: int = Field(default=9, ge=1)
    phone_min_length: int = Field(default=11, ge=1)
    branch_length: int = Field(default=4, ge=1)
    account_length: int = Field(default=5, ge=1)
    has_check_digit: bool = True
    has_complement: bool = True
    address_max_length: int = Field(default=50, ge=1)
    # Some form variants accepted any text up to the max length; others only letters and spaces.
    address_letters_only: bool = True
    # Adds a separate digits-only rule after each exact-length identifier rule.
    numeric_identifiers: bool = False
    # Exclusive lower bound on the birth year.
    min_birth_year: int = 1900
    banks: Tuple[str, ...] = Field(default=DEFAULT_BANKS, min_length=1)


PRESETS: Dict[str, RegistrationSchemaConfig] = {
    "default": RegistrationSchemaConfig(),
    # Single-page form without check digit or complement.
    "legacy": RegistrationSchemaConfig(
        phone_min_length=13,
        account_length=8,
        has_check_digit=False,
        has_complement=False,
        address_letters_only=False,
    ),
}


def get_preset(name: str) -> RegistrationSchemaConfig:
    key = (name or "default").strip().lower()
    if key not in PRESETS:
        raise ValueError(f"Unknown schema preset '{name}' (expected one of: {', '.join(sorted(PRESETS))}).")
    return PRESETS[key]


def get_schema_config(environ: Optional[Mapping[str, str]] = None) -> RegistrationSchemaConfig:
    """
    Load the registration schema configuration from environment variables.

    Reads REGISTRATION_SCHEMA_PRESET (default: "default") and per-option overrides named
    REGISTRATION_<OPTION>, e.g. REGISTRATION_CPF_LENGTH=11 or REGISTRATION_HAS_COMPLEMENT=false.
    REGISTRATION_BANKS is a comma-separated list.
    """
    env = os.environ if environ is None else environ
    base = get_preset(env.get(f"{ENV_PREFIX}SCHEMA_PRESET", "default"))

    overrides: Dict[str, Any] = {}
    for name in RegistrationSchemaConfig.model_fields:
        raw = env.get(f"{ENV_PREFIX}{name.upper()}", "").strip()
        if not raw:
            continue
        if name == "banks":
            overrides[name] = tuple(b.strip() for b in raw.split(",") if b.strip())
        else:
            overrides[name] = raw
    return _merge(base, overrides)


def load_schema_config(path: Path) -> RegistrationSchemaConfig:
    if not path.exists():
        raise FileNotFoundError(f"Schema config file not found: {path}")
    with path.open(encoding="utf-8") as handle:
        payload = json.load(handle)
    if not isinstance(payload, dict):
        raise ValueError("Schema config must be a JSON object.")
    preset = payload.pop("preset", "default")
    return _merge(get_preset(preset), payload)


def _merge(base: RegistrationSchemaConfig, overrides: Mapping[str, Any]) -> RegistrationSchemaConfig:
    if not overrides:
        return base
    # Normalise to aliases so a snake_case override cannot be shadowed by the base's camelCase key.
    normalised = {
        (to_camel(k) if k in RegistrationSchemaConfig.model_fields else k): v for k, v in overrides.items()
    }
    return RegistrationSchemaConfig.model_validate({**base.model_dump(by_alias=True), **normalised})
