from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Dict, Iterable, List, Optional, Type

from ..domain import ToolResponse, UnknownTool
from .models import ToolArguments

if TYPE_CHECKING:
    from ..services import CalendarService

JsonSchema = Dict[str, Any]
ToolFunction = Callable[["CalendarService", Any], ToolResponse]

# Bump when a tool is added, removed, or changes its argument schema.
CATALOG_VERSION = "2.0.0"


@dataclass(frozen=True)
class ApiFunction:
    name: str
    func: ToolFunction
    description: str
    arguments: Type[ToolArguments]
    tags: tuple[str, ...]

    @property
    def parameter_schema(self) -> JsonSchema:
        schema = self.arguments.model_json_schema(by_alias=True)
        schema.pop("title", None)
        schema.setdefault("properties", {})
        return schema

    def as_tool(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.parameter_schema,
        }


REGISTRY: Dict[str, ApiFunction] = {}


def register_api(
    name: str,
    *,
    description: str,
    arguments: Type[ToolArguments],
    tags: Optional[Iterable[str]] = None,
) -> Callable[[ToolFunction], ToolFunction]:
    def decorator(func: ToolFunction) -> ToolFunction:
        if name in REGISTRY:
            raise ValueError(f"API function '{name}' is already registered.")
        REGISTRY[name] = ApiFunction(
            name=name,
            func=func,
            description=description,
            arguments=arguments,
            tags=tuple(tags or ()),
        )
        return func

    return decorator


def get_api_functions() -> List[ApiFunction]:
    return list(REGISTRY.values())


def get_api_function(name: str) -> ApiFunction:
    try:
        return REGISTRY[name]
    except KeyError:
        raise UnknownTool(name) from None


def catalog() -> Dict[str, Any]:
    return {
        "version": CATALOG_VERSION,
        "tools": [api_function.as_tool() for api_function in get_api_functions()],
    }
