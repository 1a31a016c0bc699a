"""
Schema validator adapter — declarative rule tables checked by pydantic.

A schema is a plain mapping of field name -> ``FieldRule``. ``validate``
turns the named table into a pydantic model once (cached), runs the
document through it, and reports every violation as ``{path, message}``.
Nothing here talks to the network; callers use ``require_valid`` as a
hard gate before issuing any request.
"""
import logging
from dataclasses import dataclass, replace
from functools import lru_cache
from typing import Annotated, Any, Dict, List, Literal, Mapping, Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict, Field, Strict, ValidationError, create_model

from aveconnect_shopify.core.exceptions import ValidationFailure

logger = logging.getLogger("shopify_validation")


@dataclass(frozen=True)
class FieldRule:
    type: str = "any"
    required: bool = False
    enum: Optional[Tuple[Any, ...]] = None
    pattern: Optional[str] = None
    minimum: Optional[float] = None
    fields: Optional[Mapping[str, "FieldRule"]] = None
    items: Optional["FieldRule"] = None


class ValidationResult(BaseModel):
    ok: bool
    violations: List[Dict[str, str]] = Field(default_factory=list)


def relaxed(
    fields: Mapping[str, FieldRule],
    keep_required: Tuple[str, ...] = (),
) -> Dict[str, FieldRule]:
    """Copy a field table with ``required`` dropped everywhere except ``keep_required``."""
    out: Dict[str, FieldRule] = {}
    for name, rule in fields.items():
        nested_fields = relaxed(rule.fields) if rule.fields else rule.fields
        items = rule.items
        if items is not None and items.fields:
            items = replace(items, fields=relaxed(items.fields))
        out[name] = replace(
            rule,
            required=name in keep_required and rule.required,
            fields=nested_fields,
            items=items,
        )
    return out


# ── Rule table -> pydantic model ──────────────────────────────────

def _annotation(rule: FieldRule, model_name: str) -> Any:
    if rule.enum:
        return Literal[rule.enum]
    if rule.type == "string":
        if rule.pattern:
            return Annotated[str, Strict(), Field(pattern=rule.pattern)]
        return Annotated[str, Strict()]
    if rule.type == "number":
        if rule.minimum is not None:
            return Annotated[float, Strict(), Field(ge=rule.minimum)]
        return Annotated[float, Strict()]
    if rule.type == "integer":
        if rule.minimum is not None:
            return Annotated[int, Strict(), Field(ge=rule.minimum)]
        return Annotated[int, Strict()]
    if rule.type == "boolean":
        return Annotated[bool, Strict()]
    if rule.type == "object":
        if rule.fields:
            return _build_model(model_name, rule.fields)
        return Dict[str, Any]
    if rule.type == "array":
        if rule.items is not None:
            return List[_annotation(rule.items, f"{model_name}Item")]
        return List[Any]
    return Any


def _build_model(name: str, fields: Mapping[str, FieldRule]) -> Type[BaseModel]:
    definitions: Dict[str, Any] = {}
    for field_name, rule in fields.items():
        annotation = _annotation(rule, f"{name}_{field_name}")
        if rule.required:
            definitions[field_name] = (annotation, ...)
        else:
            definitions[field_name] = (Optional[annotation], None)
    return create_model(
        name,
        __config__=ConfigDict(extra="allow"),
        **definitions,
    )


@lru_cache(maxsize=None)
def _model_for(schema_name: str) -> Type[BaseModel]:
    from aveconnect_shopify.schemas.catalogue import SCHEMAS

    if schema_name not in SCHEMAS:
        raise ValueError(f"Unknown validation schema: {schema_name}")
    model_name = "".join(part.title() for part in schema_name.replace("_", ".").split("."))
    return _build_model(model_name, SCHEMAS[schema_name])


def _format_path(loc: Tuple[Any, ...]) -> str:
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)
    return path or "document"


# ── Public API ────────────────────────────────────────────────────

def validate(schema_name: str, document: Any) -> ValidationResult:
    """Check ``document`` against the named schema without mutating it."""
    model = _model_for(schema_name)
    try:
        model.model_validate(document)
    except ValidationError as exc:
        violations = [
            {"path": _format_path(err["loc"]), "message": err["msg"]}
            for err in exc.errors()
        ]
        return ValidationResult(ok=False, violations=violations)
    return ValidationResult(ok=True)


def require_valid(
    schema_name: str,
    document: Any,
    error_cls: Type[ValidationFailure] = ValidationFailure,
) -> None:
    """Raise ``error_cls`` when ``document`` fails the named schema."""
    result = validate(schema_name, document)
    if not result.ok:
        logger.info(
            "shopify validation failed schema=%s violations=%s",
            schema_name,
            result.violations,
        )
        raise error_cls(schema_name, result.violations)
