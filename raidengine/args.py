"""Typed command-line arguments that register with a shared manager."""

from __future__ import annotations

import re
import sys
from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterator, Optional, Sequence

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class ArgType(Enum):
    BOOL = "bool"
    INT = "int"
    STRING = "string"


class CommandLineManager:
    """Holds the registered arguments and feeds them the command line."""

    def __init__(self) -> None:
        self._args: list[CommandLineArg] = []

    def add_argument(self, argument: CommandLineArg) -> None:
        self._args.append(argument)

    def remove_argument(self, argument: CommandLineArg) -> None:
        for index, existing in enumerate(self._args):
            if existing is argument:
                del self._args[index]
                return

    def parse(self, argv: Optional[Sequence[str]] = None) -> bool:
        """Hand each ``-flag`` in ``argv`` (program name excluded) to the first argument that accepts it."""
        arguments = list(sys.argv[1:] if argv is None else argv)
        for index, arg in enumerate(arguments):
            if not arg.startswith("-"):
                continue
            following = arguments[index + 1] if index + 1 < len(arguments) else ""
            for cmd_arg in self._args:
                if cmd_arg.has_value:
                    continue
                if cmd_arg.parse(arg, following):
                    break
        return True

    def shutdown(self) -> None:
        self._args.clear()

    def __len__(self) -> int:
        return len(self._args)

    def __iter__(self) -> Iterator[CommandLineArg]:
        return iter(list(self._args))

    def __getitem__(self, index: int) -> CommandLineArg:
        return self._args[index]


# Shared manager used by arguments that are not given one explicitly.
COMMAND_LINE = CommandLineManager()


class CommandLineArg(ABC):
    """A named argument; it registers with its manager when created."""

    type: ArgType

    def __init__(self, name: str, manager: Optional[CommandLineManager] = None) -> None:
        self.name = name
        self.has_value = False
        self.owner = manager if manager is not None else COMMAND_LINE
        self.owner.add_argument(self)

    @property
    def flag(self) -> str:
        return "-" + self.name

    @abstractmethod
    def parse(self, arg: str, following: str) -> bool:
        """Try to take a value from ``arg`` (and the word after it); return whether a value is held."""

    @abstractmethod
    def display(self) -> str:
        """Render the argument as ``-name=value``."""

    def _inline_value(self, arg: str) -> Optional[str]:
        prefix = self.flag + "="
        if arg.startswith(prefix):
            return arg[len(prefix):]
        return None


class BoolArgument(CommandLineArg):
    type = ArgType.BOOL

    def __init__(self, name: str, manager: Optional[CommandLineManager] = None) -> None:
        super().__init__(name, manager)
        self._value = False

    @property
    def value(self) -> bool:
        return self._value

    @value.setter
    def value(self, value: bool) -> None:
        self._value = value
        self.has_value = True

    def parse(self, arg: str, following: str) -> bool:
        if arg == self.flag:
            self._value = True
            self.has_value = True
        return self.has_value

    def reset(self) -> None:
        self._value = False
        self.has_value = False

    def display(self) -> str:
        return f"{self.flag}={'True' if self._value else 'False'}"

    def __bool__(self) -> bool:
        return self._value


def _parse_leading_int(text: str) -> tuple[int, bool]:
    match = _LEADING_INT.match(text)
    if not match:
        return 0, False
    value = max(_INT_MIN, min(_INT_MAX, int(match.group(1))))
    return value, True


class IntArgument(CommandLineArg):
    type = ArgType.INT

    def __init__(self, name: str, manager: Optional[CommandLineManager] = None) -> None:
        super().__init__(name, manager)
        self._value = 0

    @property
    def value(self) -> int:
        return self._value

    @value.setter
    def value(self, value: int) -> None:
        self._value = value
        self.has_value = True

    def parse(self, arg: str, following: str) -> bool:
        if arg == self.flag:
            if following:
                self._value, self.has_value = _parse_leading_int(following)
        else:
            inline = self._inline_value(arg)
            if inline is not None:
                self._value, self.has_value = _parse_leading_int(inline)
        return self.has_value

    def reset(self) -> None:
        self._value = 0
        self.has_value = False

    def display(self) -> str:
        return f"{self.flag}={self._value}"

    def __int__(self) -> int:
        return self._value


class StringArgument(CommandLineArg):
    type = ArgType.STRING

    def __init__(self, name: str, manager: Optional[CommandLineManager] = None) -> None:
        super().__init__(name, manager)
        self._value = ""

    @property
    def value(self) -> str:
        return self._value

    @value.setter
    def value(self, value: str) -> None:
        self._value = value
        self.has_value = True

    def parse(self, arg: str, following: str) -> bool:
        if arg == self.flag:
            if following:
                self._value = following
                self.has_value = True
        else:
            inline = self._inline_value(arg)
            if inline is not None:
                self._value = inline
                self.has_value = True
        return self.has_value

    def reset(self) -> None:
        self._value = ""
        self.has_value = False

    def display(self) -> str:
        return f"{self.flag}={self._value}"

    def __str__(self) -> str:
        return self._value


class ArgAutomationHelper:
    """Reports a boolean argument's value once, then always false."""

    def __init__(self, arg: BoolArgument) -> None:
        self.arg = arg
        self.has_processed = False

    def proceed(self) -> bool:
        if self.has_processed:
            return False
        self.has_processed = True
        return self.arg.value