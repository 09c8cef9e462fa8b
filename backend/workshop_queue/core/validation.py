"""Reglas de validación compartidas para los payloads de jobs.

Es la única fuente de verdad de las reglas por campo: los modelos Pydantic
las aplican en sus validadores y el formulario del cliente puede pedirlas
tal cual vía `describe_rules()`.
"""

from __future__ import annotations

from typing import Dict, NamedTuple

from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError


class FieldRule(NamedTuple):
    min_length: int
    message: str


# Claves en snake_case (nombre del atributo Python)
FIELD_RULES: Dict[str, FieldRule] = {
    "customer_name": FieldRule(2, "Customer name must be at least 2 characters"),
    "reg_number": FieldRule(4, "Registration number must be at least 4 characters"),
    "service_type": FieldRule(1, "Please select a service type"),
    "brand": FieldRule(1, "Please select a vehicle brand"),
    "branch": FieldRule(1, "Branch is required"),
}

# Opciones que ofrece la UI. El servidor sólo exige que no estén vacías.
SERVICE_TYPE_OPTIONS = (
    "Regular Service",
    "Diagnostics",
    "Oil Change",
    "Brake Repair",
    "General Repair",
)
BRAND_OPTIONS = ("Mitsubishi", "Toyota", "Suzuki")


def enforce_rule(field_name: str, value: str) -> str:
    """Aplica la regla de longitud mínima de `field_name` a `value`."""
    rule = FIELD_RULES[field_name]
    if len(value) < rule.min_length:
        raise PydanticCustomError("min_length", rule.message)
    return value


def describe_rules() -> dict:
    """Reglas y opciones en un formato serializable para el cliente."""
    return {
        "fields": {
            to_camel(name): {"minLength": rule.min_length, "message": rule.message}
            for name, rule in FIELD_RULES.items()
        },
        "serviceTypes": list(SERVICE_TYPE_OPTIONS),
        "brands": list(BRAND_OPTIONS),
    }
