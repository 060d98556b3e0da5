"""Build contract ABIs from a module's syntax tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from feabi.elements import (
    Contract,
    ElementaryType,
    Event,
    EventField,
    FixedArray,
    FixedBytes,
    FuncInput,
    FuncOutput,
    FuncType,
    Function,
    TupleType,
    VarType,
)
from feabi.errors import CompileError


@dataclass(frozen=True)
class BaseTypeDesc:
    """A named type, such as ``u256``, ``address`` or a type alias."""

    base: str


@dataclass(frozen=True)
class ArrayTypeDesc:
    """A fixed-size array type, such as ``u256[10]`` or ``bytes[100]``."""

    typ: TypeDesc
    dimension: int


@dataclass(frozen=True)
class MapTypeDesc:
    """A mapping type, such as ``map<address, u256>``."""

    from_type: TypeDesc
    to_type: TypeDesc


@dataclass(frozen=True)
class TupleTypeDesc:
    """A tuple type, such as ``(u256, bool)``."""

    items: tuple[TypeDesc, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))


TypeDesc = Union[BaseTypeDesc, ArrayTypeDesc, MapTypeDesc, TupleTypeDesc]


@dataclass
class FuncArg:
    """A function parameter."""

    name: str
    typ: TypeDesc


@dataclass
class FuncDef:
    """A function defined in a contract."""

    name: str
    args: list[FuncArg] = field(default_factory=list)
    return_type: TypeDesc | None = None
    is_pub: bool = False


@dataclass
class EventFieldDef:
    """A field of an event definition."""

    name: str
    typ: TypeDesc
    indexed: bool = False


@dataclass
class EventDef:
    """An event defined in a contract."""

    name: str
    fields: list[EventFieldDef] = field(default_factory=list)


@dataclass
class ContractField:
    """A storage field of a contract."""

    name: str
    typ: TypeDesc
    is_pub: bool = False


ContractStmt = Union[FuncDef, EventDef, ContractField]


@dataclass
class ContractDef:
    """A contract definition."""

    name: str
    body: list[ContractStmt] = field(default_factory=list)


@dataclass
class TypeDef:
    """A module level type alias."""

    name: str
    typ: TypeDesc


@dataclass
class ModuleDef:
    """A module: type aliases, contracts and other statements."""

    body: list[object] = field(default_factory=list)


_ELEMENTARY_BASES: dict[str, ElementaryType] = {
    "u256": ElementaryType.UINT256,
    "u128": ElementaryType.UINT128,
    "u64": ElementaryType.UINT64,
    "u32": ElementaryType.UINT32,
    "u16": ElementaryType.UINT16,
    "u8": ElementaryType.UINT8,
    "i256": ElementaryType.INT256,
    "i128": ElementaryType.INT128,
    "i64": ElementaryType.INT64,
    "i32": ElementaryType.INT32,
    "i16": ElementaryType.INT16,
    "i8": ElementaryType.INT8,
    "bool": ElementaryType.BOOL,
    "address": ElementaryType.ADDRESS,
}


def resolve_type(type_defs: dict[str, TypeDesc], typ: TypeDesc) -> VarType:
    """Map a type description to its ABI type, following type aliases."""
    if isinstance(typ, BaseTypeDesc):
        alias = type_defs.get(typ.base)
        if alias is not None:
            return resolve_type(type_defs, alias)
        elementary = _ELEMENTARY_BASES.get(typ.base)
        if elementary is not None:
            return elementary
        if typ.base.startswith("string"):
            return ElementaryType.STRING
        raise CompileError(f"unrecognized type: {typ.base}")
    if isinstance(typ, ArrayTypeDesc):
        if isinstance(typ.typ, BaseTypeDesc) and typ.typ.base == "bytes":
            return FixedBytes(typ.dimension)
        return FixedArray(resolve_type(type_defs, typ.typ), typ.dimension)
    if isinstance(typ, MapTypeDesc):
        raise CompileError("maps not supported in ABI")
    if isinstance(typ, TupleTypeDesc):
        return TupleType(tuple(resolve_type(type_defs, item) for item in typ.items))
    raise CompileError(f"unrecognized type description: {typ!r}")


def _function(type_defs: dict[str, TypeDesc], func: FuncDef) -> Function:
    inputs = [FuncInput(arg.name, resolve_type(type_defs, arg.typ)) for arg in func.args]

    outputs: list[FuncOutput] = []
    if func.return_type is not None:
        returned = resolve_type(type_defs, func.return_type)
        if not (isinstance(returned, TupleType) and not returned.items):
            outputs.append(FuncOutput("", returned))

    if func.name == "__init__":
        name, kind = "", FuncType.CONSTRUCTOR
    else:
        name, kind = func.name, FuncType.FUNCTION

    return Function(name=name, typ=kind, inputs=inputs, outputs=outputs)


def _event(type_defs: dict[str, TypeDesc], event: EventDef) -> Event:
    fields = [
        EventField(f.name, resolve_type(type_defs, f.typ), f.indexed) for f in event.fields
    ]
    return Event(name=event.name, fields=fields)


def _contract(type_defs: dict[str, TypeDesc], contract: ContractDef) -> Contract:
    abi = Contract()
    for stmt in contract.body:
        if isinstance(stmt, FuncDef):
            if stmt.is_pub:
                abi.functions.append(_function(type_defs, stmt))
        elif isinstance(stmt, EventDef):
            abi.events.append(_event(type_defs, stmt))
    return abi


def build_module_abis(module: ModuleDef) -> dict[str, Contract]:
    """Build the ABI of every contract in the module, keyed by contract name."""
    type_defs: dict[str, TypeDesc] = {}
    abis: dict[str, Contract] = {}
    for stmt in module.body:
        if isinstance(stmt, TypeDef):
            if stmt.name in type_defs:
                raise CompileError("duplicate type definition")
            type_defs[stmt.name] = stmt.typ
        elif isinstance(stmt, ContractDef):
            contract = _contract(type_defs, stmt)
            if stmt.name in abis:
                raise CompileError("duplicate contract definition")
            abis[stmt.name] = contract
    return abis


def build(module: ModuleDef) -> dict[str, str]:
    """Build the pretty-printed JSON ABI of every contract in the module."""
    return {name: abi.json(True) for name, abi in build_module_abis(module).items()}