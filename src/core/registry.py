"""Operation registry: the name -> handler table behind the MCP tools.

Each operation is declared once as an async function whose annotated
signature is its input contract. At registration the registry:
  - rejects duplicate names (fail fast at startup),
  - builds a pydantic model of the arguments from the signature,
  - forwards the same function to FastMCP, which derives the wire schema
    from that same signature.

`dispatch` is the in-process entry point: it validates raw arguments
before the handler is ever awaited.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Type, get_type_hints

from pydantic import BaseModel, create_model
from pydantic import ValidationError as PydanticValidationError

from core.errors import DuplicateOperationError, UnknownOperationError, ValidationError

Handler = Callable[..., Awaitable[str]]


@dataclass(frozen=True)
class Operation:
    name: str
    title: str
    description: str
    handler: Handler
    args_model: Type[BaseModel]

    def validate(self, arguments: Mapping[str, Any]) -> Dict[str, Any]:
        try:
            parsed = self.args_model.model_validate(dict(arguments))
        except PydanticValidationError as e:
            fields = sorted({".".join(str(p) for p in err["loc"]) or "<root>" for err in e.errors()})
            raise ValidationError(
                f"Invalid arguments for '{self.name}': {', '.join(fields)}",
                fields=fields,
            ) from e
        return {key: getattr(parsed, key) for key in self.args_model.model_fields}


def build_args_model(name: str, fn: Callable[..., Any]) -> Type[BaseModel]:
    """Generate the argument model for `fn` from its annotated signature."""
    hints = get_type_hints(fn, include_extras=True)
    fields: Dict[str, Any] = {}
    for param in inspect.signature(fn).parameters.values():
        annotation = hints.get(param.name, Any)
        default = ... if param.default is inspect.Parameter.empty else param.default
        fields[param.name] = (annotation, default)

    model_name = "".join(part.capitalize() for part in name.split("-")) + "Arguments"
    return create_model(model_name, **fields)


class OperationRegistry:
    def __init__(self, mcp: Optional[Any] = None) -> None:
        self._mcp = mcp
        self._operations: Dict[str, Operation] = {}

    def tool(self, *, name: str, title: str, description: Optional[str] = None) -> Callable[[Handler], Handler]:
        def _decorator(fn: Handler) -> Handler:
            self.add(fn, name=name, title=title, description=description)
            return fn

        return _decorator

    def add(self, fn: Handler, *, name: str, title: str, description: Optional[str] = None) -> Operation:
        if name in self._operations:
            raise DuplicateOperationError(f"Operation already registered: {name}")

        desc = description or inspect.getdoc(fn) or title
        op = Operation(
            name=name,
            title=title,
            description=desc,
            handler=fn,
            args_model=build_args_model(name, fn),
        )
        self._operations[name] = op

        if self._mcp is not None:
            self._mcp.tool(name=name, title=title, description=desc)(fn)
        return op

    def get(self, name: str) -> Operation:
        op = self._operations.get(name)
        if op is None:
            raise UnknownOperationError(f"Unknown operation: {name}")
        return op

    def names(self) -> List[str]:
        return list(self._operations)

    def __contains__(self, name: object) -> bool:
        return name in self._operations

    def __len__(self) -> int:
        return len(self._operations)

    async def dispatch(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> str:
        op = self.get(name)
        kwargs = op.validate(arguments or {})
        return await op.handler(**kwargs)
