"""BaseTool: abstract foundation for all medea tool strategies.

Every tool declares an :class:`OptionSchema` and implements
``execute(options, source) -> dict``. :meth:`BaseTool.run` owns the
ordering: validate first, then execute, which is the only place the
input payload can be read.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, ClassVar

from medea.services.errors import InvocationError
from medea.services.input import InputSource
from medea.services.options import OptionSchema
from medea.services.result import ToolResult

logger = logging.getLogger(__name__)


class BaseTool:
    """Abstract base for tool strategies.

    Usage::

        class UpperTool(BaseTool):
            name = "upper"
            options = OptionSchema(OptionSpec(name="text", positional=True))

            def execute(self, options, source):
                return {"text": [source.read_text().upper()]}
    """

    name: ClassVar[str] = ""
    options: ClassVar[OptionSchema] = OptionSchema()
    # Positional whose value, when given, replaces stdin as the payload.
    input_option: ClassVar[str | None] = None

    def run(self, raw: Mapping[str, Any], source: InputSource) -> ToolResult:
        """Validate *raw* option values, then execute against *source*."""
        try:
            opts = self.options.validate(raw)
            logger.debug("Running %s with %s", self.name, dict(opts))
            data = self.execute(opts, source)
        except InvocationError as exc:
            logger.debug("%s failed: %s", self.name, exc.code.value)
            return ToolResult.failure(self.op_name(raw), exc)
        return ToolResult(ok=True, op=self.op_name(raw), data=data)

    def op_name(self, raw: Mapping[str, Any]) -> str:
        """Name of the operation reported in the result."""
        return self.name

    def execute(self, options: Mapping[str, Any], source: InputSource) -> dict[str, Any]:
        raise NotImplementedError
