from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Protocol


class PromptIO(Protocol):
    def print(self, text: str = "") -> None: ...

    def input(self, prompt: str = "") -> str: ...


def print_lines(prompt_io: PromptIO, lines: Iterable[str]) -> None:
    for line in lines:
        prompt_io.print(line)


class ConsolePromptIO:
    def print(self, text: str = "") -> None:
        print(text, flush=True)

    def input(self, prompt: str = "") -> str:
        return input(prompt)


@dataclass(slots=True)
class BufferPromptIO:
    """Scripted prompt I/O; running out of inputs behaves like a closed stdin."""

    inputs: List[str] = field(default_factory=list)
    outputs: List[str] = field(default_factory=list)
    prompts: List[str] = field(default_factory=list)

    def print(self, text: str = "") -> None:
        self.outputs.append(text)

    def input(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self.inputs:
            raise EOFError("BufferPromptIO has no more inputs")
        return self.inputs.pop(0)
