"""
Инфраструктурные реализации портов общего ядра.
"""

import json
import sys
from typing import Any, Dict, TextIO

from .interfaces import ILogger


class ConsoleLogger(ILogger):
    """Простая реализация логгера, выводящая сообщения в консоль."""

    def info(self, message: str, **kwargs: Any) -> None:
        self._write("INFO", message, kwargs, sys.stdout)

    def error(self, message: str, **kwargs: Any) -> None:
        self._write("ERROR", message, kwargs, sys.stderr)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._write("WARNING", message, kwargs, sys.stderr)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._write("DEBUG", message, kwargs, sys.stdout)

    @staticmethod
    def _write(
        level: str, message: str, context: Dict[str, Any], stream: TextIO
    ) -> None:
        print(f"[{level}] {message}", file=stream, flush=True)
        if context:
            print(
                "  Context:",
                json.dumps(context, default=str, indent=2, ensure_ascii=False),
                file=stream,
                flush=True,
            )
