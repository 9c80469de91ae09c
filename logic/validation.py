from dataclasses import dataclass, field
from typing import Any
from pydantic import ValidationError
from database.models import FormSchema

@dataclass(frozen=True)
class FieldError:
    field: str
    message: str

@dataclass
class ValidationResult:
    data: FormSchema | None = None
    errors: list[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.data is not None and not self.errors

    def messages_by_field(self) -> dict[str, list[str]]: #what a form shows beside each input
        grouped: dict[str, list[str]] = {}
        for error in self.errors:
            grouped.setdefault(error.field, []).append(error.message)
        return grouped

def validate(schema: type[FormSchema], raw_input: dict[str, Any]) -> ValidationResult:
    #pydantic reports every failing field, not just the first
    try:
        return ValidationResult(data=schema.model_validate(raw_input))
    except ValidationError as e:
        return ValidationResult(errors=[to_field_error(schema, error) for error in e.errors()])

def to_field_error(schema: type[FormSchema], error: dict) -> FieldError:
    field_name = ".".join(str(part) for part in error["loc"]) or "__root__"
    if error["type"] == "missing":
        message = schema.required_message(field_name)
    elif error["type"] == "value_error":
        message = str(error["ctx"]["error"]) #our own ValueError text, without pydantic's "Value error, " prefix
    else:
        message = error["msg"]
    return FieldError(field=field_name, message=message)
