"""Plugin registry for pdfstudio tools."""

from __future__ import annotations

from typing import Dict, Iterable

from .interfaces import BaseTool, ConversionContext


class ToolRegistry:
    """Registry mapping tool names to :class:`BaseTool` subclasses."""

    def __init__(self) -> None:
        self._tools: Dict[str, type[BaseTool]] = {}

    def register(self, name: str, tool_class: type[BaseTool]) -> None:
        if name in self._tools:
            raise ValueError(f"Tool '{name}' is already registered")
        self._tools[name] = tool_class

    def create(self, name: str, context: ConversionContext) -> BaseTool:
        tool_class = self._tools.get(name)
        if tool_class is None:
            available = ", ".join(self.names()) or "none"
            raise KeyError(f"Tool '{name}' is not registered (available: {available})")
        return tool_class(context)

    def names(self) -> Iterable[str]:
        return sorted(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools


registry = ToolRegistry()


def register_tool(name: str):
    def decorator(cls: type[BaseTool]) -> type[BaseTool]:
        cls.name = name
        registry.register(name, cls)
        return cls

    return decorator


def run_tool(name: str, context: ConversionContext):
    """Create the tool registered as *name* for *context* and run it."""

    return registry.create(name, context).run()


__all__ = ["ToolRegistry", "registry", "register_tool", "run_tool", "ConversionContext", "BaseTool"]
