"""Elements that describe the public interface of a contract."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from feabi.errors import CompileError


class ElementaryType(str, Enum):
    """Types whose ABI name does not depend on parameters."""

    UINT256 = "uint256"
    UINT128 = "uint128"
    UINT64 = "uint64"
    UINT32 = "uint32"
    UINT16 = "uint16"
    UINT8 = "uint8"
    INT256 = "int256"
    INT128 = "int128"
    INT64 = "int64"
    INT32 = "int32"
    INT16 = "int16"
    INT8 = "int8"
    BOOL = "bool"
    ADDRESS = "address"
    STRING = "string"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class FixedBytes:
    """A fixed-size byte array, such as ``bytes100``."""

    size: int

    def __str__(self) -> str:
        return f"bytes{self.size}"


@dataclass(frozen=True)
class FixedArray:
    """A fixed-size array of another type, such as ``address[42]``."""

    inner: VarType
    dimension: int

    def __str__(self) -> str:
        return f"{self.inner}[{self.dimension}]"


@dataclass(frozen=True)
class TupleType:
    """A tuple of types, such as ``(uint256,bool)``."""

    items: tuple[VarType, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))

    def __str__(self) -> str:
        return "(" + ",".join(str(item) for item in self.items) + ")"


VarType = Union[ElementaryType, FixedBytes, FixedArray, TupleType]


class FuncType(str, Enum):
    """The kind of a public function."""

    FUNCTION = "function"
    CONSTRUCTOR = "constructor"
    RECEIVE = "receive"
    FALLBACK = "fallback"

    def __str__(self) -> str:
        return self.value


class StateMutability(str, Enum):
    """The mutability of a public function."""

    PURE = "pure"
    VIEW = "view"
    NONPAYABLE = "nonpayable"
    PAYABLE = "payable"

    def __str__(self) -> str:
        return self.value


@dataclass
class EventField:
    """A single event field."""

    name: str
    typ: VarType
    indexed: bool

    def to_abi(self) -> dict[str, Any]:
        """Return the field as an ABI mapping."""
        return {"name": self.name, "type": str(self.typ), "indexed": self.indexed}


@dataclass
class Event:
    """An event interface."""

    name: str
    fields: list[EventField] = field(default_factory=list)
    anonymous: bool = False
    typ: str = "event"

    def to_abi(self) -> dict[str, Any]:
        """Return the event as an ABI mapping."""
        return {
            "name": self.name,
            "type": self.typ,
            "inputs": [f.to_abi() for f in self.fields],
            "anonymous": self.anonymous,
        }


@dataclass
class FuncInput:
    """A single function input."""

    name: str
    typ: VarType

    def to_abi(self) -> dict[str, Any]:
        """Return the input as an ABI mapping."""
        return {"name": self.name, "type": str(self.typ)}


@dataclass
class FuncOutput:
    """A single function output."""

    name: str
    typ: VarType

    def to_abi(self) -> dict[str, Any]:
        """Return the output as an ABI mapping."""
        return {"name": self.name, "type": str(self.typ)}


@dataclass
class Function:
    """A function interface."""

    name: str
    typ: FuncType
    inputs: list[FuncInput] = field(default_factory=list)
    outputs: list[FuncOutput] = field(default_factory=list)

    def to_abi(self) -> dict[str, Any]:
        """Return the function as an ABI mapping."""
        return {
            "name": self.name,
            "type": str(self.typ),
            "inputs": [i.to_abi() for i in self.inputs],
            "outputs": [o.to_abi() for o in self.outputs],
        }


@dataclass
class Contract:
    """All public interfaces of a contract."""

    events: list[Event] = field(default_factory=list)
    functions: list[Function] = field(default_factory=list)

    def to_abi(self) -> list[dict[str, Any]]:
        """Return the ABI entries: every event, then every function."""
        return [e.to_abi() for e in self.events] + [f.to_abi() for f in self.functions]

    def json(self, prettify: bool) -> str:
        """Serialize the contract into a JSON ABI."""
        try:
            if prettify:
                return json.dumps(self.to_abi(), indent=2, ensure_ascii=False)
            return json.dumps(self.to_abi(), separators=(",", ":"), ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            raise CompileError("unable to serialize contract to json") from exc