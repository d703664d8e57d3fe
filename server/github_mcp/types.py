from pydantic import BaseModel, ConfigDict
from typing import List, Literal, Dict, Any

class ToolDescriptor(BaseModel):
    """Static metadata advertising a tool: name, description and input schema."""
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    input_schema: Dict[str, Any]

    @property
    def properties(self) -> Dict[str, Any]:
        return self.input_schema.get("properties", {})

    @property
    def required(self) -> List[str]:
        return list(self.input_schema.get("required", []))

    def defaults(self) -> Dict[str, Any]:
        """Declared default value of every optional field that has one."""
        return {
            field: spec["default"]
            for field, spec in self.properties.items()
            if "default" in spec
        }

class TextBlock(BaseModel):
    """A single text content block of a tool result."""
    type: Literal["text"] = "text"
    text: str

class ToolResult(BaseModel):
    """Result of one tool invocation."""
    content: List[TextBlock]
