# app/models/tool_models.py
# Data-driven function declarations. Validated once when the catalog is built at startup.

from typing import List, Dict, Any, Optional, Literal, Iterable, Tuple
from pydantic import BaseModel, ConfigDict, Field, model_validator

class ToolParameter(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["string", "number", "integer", "boolean"]
    description: Optional[str] = None
    enum: Optional[Tuple[str, ...]] = None
    required: bool = False

    @model_validator(mode="after")
    def _check_enum(self) -> "ToolParameter":
        if self.enum is not None:
            if self.type != "string":
                raise ValueError("enum is only supported on string parameters")
            if not self.enum:
                raise ValueError("enum must list at least one value")
        return self

    def to_schema(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"type": self.type}
        if self.description:
            out["description"] = self.description
        if self.enum:
            out["enum"] = list(self.enum)
        return out

class ToolDeclaration(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., pattern=r"^[A-Za-z_][A-Za-z0-9_]*$")
    description: str = Field(..., min_length=1)
    parameters: Dict[str, ToolParameter] = Field(default_factory=dict)

    @property
    def required_parameters(self) -> List[str]:
        return [k for k, p in self.parameters.items() if p.required]

    def missing_required(self, args: Dict[str, Any]) -> List[str]:
        return [p for p in self.required_parameters if p not in args]

    def to_function_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {
            "type": "object",
            "properties": {k: p.to_schema() for k, p in self.parameters.items()},
        }
        required = self.required_parameters
        if required:
            schema["required"] = required
        return {"name": self.name, "description": self.description, "parameters": schema}

    def to_llm_tool(self) -> Dict[str, Any]:
        return {"type": "function", "function": self.to_function_schema()}

class ToolCatalog:
    """Ordered, name-unique set of tool declarations."""

    def __init__(self, declarations: Iterable[ToolDeclaration]):
        decls = list(declarations)
        seen = set()
        for d in decls:
            if d.name in seen:
                raise ValueError(f"duplicate tool declaration: {d.name}")
            seen.add(d.name)
        self._decls: Tuple[ToolDeclaration, ...] = tuple(decls)
        self._by_name: Dict[str, ToolDeclaration] = {d.name: d for d in decls}

    @classmethod
    def from_dicts(cls, raw: Iterable[Dict[str, Any]]) -> "ToolCatalog":
        return cls(ToolDeclaration.model_validate(r) for r in raw)

    def __len__(self) -> int:
        return len(self._decls)

    @property
    def names(self) -> List[str]:
        return [d.name for d in self._decls]

    def get(self, name: str) -> Optional[ToolDeclaration]:
        return self._by_name.get(name)

    def to_llm_tools(self) -> List[Dict[str, Any]]:
        return [d.to_llm_tool() for d in self._decls]
