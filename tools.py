"""
Tool registration: maps each externally callable tool name to its pure
function and input schema. Transports (stdio, HTTP, UI) dispatch through
call_tool() and get back display text; bad user input never raises here.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Type

from pydantic import BaseModel, ValidationError

from config import SERVER_INFO
from finance.errors import CalculationError, InvalidInputError, MissingInputError
from finance.taxes import calculate_sdlt, describe_sdlt
from models import SdltRequest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tool:
    name: str
    description: str
    function: Callable[[BaseModel], str]
    request_model: Type[BaseModel]

    @property
    def input_schema(self) -> Dict[str, Any]:
        return self.request_model.model_json_schema()


@dataclass(frozen=True)
class ToolResult:
    text: str
    is_error: bool = False


def _calculate_sdlt_tool(request: SdltRequest) -> str:
    return describe_sdlt(calculate_sdlt(request.property_value))


TOOLS: Dict[str, Tool] = {
    "calculate_sdlt": Tool(
        name="calculate_sdlt",
        description="Calculate UK SDLT - property tax",
        function=_calculate_sdlt_tool,
        request_model=SdltRequest,
    ),
}


def list_tools() -> List[Dict[str, Any]]:
    return [
        {"name": t.name, "description": t.description, "inputSchema": t.input_schema}
        for t in TOOLS.values()
    ]


def server_info() -> Dict[str, str]:
    return dict(SERVER_INFO)


def _to_calculation_error(exc: ValidationError, arguments: Mapping[str, Any]) -> CalculationError:
    first = exc.errors()[0]
    field = first["loc"][0] if first["loc"] else "property_value"
    if first["type"] == "missing" or arguments.get(field) is None:
        return MissingInputError(field)
    return InvalidInputError(arguments.get(field), first["msg"].lower())


def call_tool(name: str, arguments: Optional[Mapping[str, Any]] = None) -> ToolResult:
    """Run a registered tool. Raises KeyError for an unknown tool name."""
    tool = TOOLS[name]
    if arguments is None:
        arguments = {}
    logger.debug("Calling tool %s with %r", name, arguments)
    if not isinstance(arguments, Mapping):
        err = InvalidInputError(arguments, "arguments must be an object")
        logger.info("Rejected %s input: %s", name, err.message)
        return ToolResult(text=err.message, is_error=True)
    try:
        request = tool.request_model.model_validate(arguments)
        text = tool.function(request)
    except ValidationError as exc:
        err = _to_calculation_error(exc, arguments)
        logger.info("Rejected %s input: %s", name, err.message)
        return ToolResult(text=err.message, is_error=True)
    except CalculationError as err:
        logger.info("Rejected %s input: %s", name, err.message)
        return ToolResult(text=err.message, is_error=True)
    return ToolResult(text=text)
