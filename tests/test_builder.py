import json

import pytest

from feabi.builder import (
    ArrayTypeDesc,
    BaseTypeDesc,
    ContractDef,
    ContractField,
    EventDef,
    EventFieldDef,
    FuncArg,
    FuncDef,
    MapTypeDesc,
    ModuleDef,
    TupleTypeDesc,
    TypeDef,
    build,
    build_module_abis,
    resolve_type,
)
from feabi.elements import (
    ElementaryType,
    FixedArray,
    FixedBytes,
    FuncType,
    TupleType,
)
from feabi.errors import CompileError


def _foo_module():
    return ModuleDef(
        body=[
            ContractDef(
                name="Foo",
                body=[
                    EventDef(
                        name="Food",
                        fields=[EventFieldDef("barge", BaseTypeDesc("u256"), indexed=True)],
                    ),
                    FuncDef(
                        name="__init__",
                        args=[FuncArg("x", BaseTypeDesc("address"))],
                        is_pub=True,
                    ),
                    FuncDef(
                        name="baz",
                        args=[FuncArg("x", BaseTypeDesc("address"))],
                        return_type=BaseTypeDesc("u256"),
                    ),
                    FuncDef(
                        name="bar",
                        args=[FuncArg("x", BaseTypeDesc("u256"))],
                        return_type=ArrayTypeDesc(BaseTypeDesc("u256"), 10),
                        is_pub=True,
                    ),
                ],
            )
        ]
    )


def test_module_function():
    abis = build_module_abis(_foo_module())
    abi = abis["Foo"]
    assert abi.events[0].name == "Food"
    assert abi.events[0].fields[0].indexed is True
    assert len(abi.functions) == 2
    assert abi.functions[0].name == ""
    assert abi.functions[0].typ == FuncType.CONSTRUCTOR
    assert abi.functions[0].inputs[0].typ == ElementaryType.ADDRESS
    assert abi.functions[1].name == "bar"
    assert abi.functions[1].typ == FuncType.FUNCTION
    assert abi.functions[1].inputs[0].typ == ElementaryType.UINT256
    assert abi.functions[1].outputs[0].typ == FixedArray(ElementaryType.UINT256, 10)


def test_build_produces_json_abi():
    result = build(_foo_module())
    assert list(result) == ["Foo"]
    entries = json.loads(result["Foo"])
    assert entries[0] == {
        "name": "Food",
        "type": "event",
        "inputs": [{"name": "barge", "type": "uint256", "indexed": True}],
        "anonymous": False,
    }
    assert entries[2] == {
        "name": "bar",
        "type": "function",
        "inputs": [{"name": "x", "type": "uint256"}],
        "outputs": [{"name": "", "type": "uint256[10]"}],
    }
    assert entries[1]["type"] == "constructor"


@pytest.mark.parametrize(
    "base,expected",
    [
        ("u256", ElementaryType.UINT256),
        ("u8", ElementaryType.UINT8),
        ("i128", ElementaryType.INT128),
        ("bool", ElementaryType.BOOL),
        ("address", ElementaryType.ADDRESS),
        ("string100", ElementaryType.STRING),
    ],
)
def test_resolve_base_types(base, expected):
    assert resolve_type({}, BaseTypeDesc(base)) == expected


def test_resolve_bytes_array():
    assert resolve_type({}, ArrayTypeDesc(BaseTypeDesc("bytes"), 100)) == FixedBytes(100)


def test_resolve_nested_array():
    typ = ArrayTypeDesc(ArrayTypeDesc(BaseTypeDesc("address"), 2), 3)
    assert str(resolve_type({}, typ)) == "address[2][3]"


def test_resolve_tuple():
    typ = TupleTypeDesc((BaseTypeDesc("u256"), BaseTypeDesc("bool")))
    assert resolve_type({}, typ) == TupleType((ElementaryType.UINT256, ElementaryType.BOOL))


def test_resolve_alias():
    type_defs = {"Balance": BaseTypeDesc("u128"), "Alias": BaseTypeDesc("Balance")}
    assert resolve_type(type_defs, BaseTypeDesc("Alias")) == ElementaryType.UINT128


def test_resolve_unrecognized_type():
    with pytest.raises(CompileError) as info:
        resolve_type({}, BaseTypeDesc("float"))
    assert str(info.value) == "unrecognized type: float"


def test_resolve_map_is_rejected():
    with pytest.raises(CompileError) as info:
        resolve_type({}, MapTypeDesc(BaseTypeDesc("address"), BaseTypeDesc("u256")))
    assert str(info.value) == "maps not supported in ABI"


def test_empty_tuple_return_has_no_outputs():
    module = ModuleDef(
        body=[
            ContractDef(
                "Foo",
                [FuncDef("bar", return_type=TupleTypeDesc(()), is_pub=True)],
            )
        ]
    )
    assert build_module_abis(module)["Foo"].functions[0].outputs == []


def test_type_alias_used_in_contract():
    module = ModuleDef(
        body=[
            TypeDef("Amount", BaseTypeDesc("u64")),
            ContractDef(
                "Foo",
                [
                    ContractField("stored", BaseTypeDesc("u256")),
                    FuncDef("bar", [FuncArg("a", BaseTypeDesc("Amount"))], is_pub=True),
                ],
            ),
        ]
    )
    abi = build_module_abis(module)["Foo"]
    assert abi.functions[0].inputs[0].typ == ElementaryType.UINT64
    assert abi.events == []


def test_type_alias_must_precede_use():
    module = ModuleDef(
        body=[
            ContractDef(
                "Foo", [FuncDef("bar", [FuncArg("a", BaseTypeDesc("Amount"))], is_pub=True)]
            ),
            TypeDef("Amount", BaseTypeDesc("u64")),
        ]
    )
    with pytest.raises(CompileError, match="unrecognized type: Amount"):
        build_module_abis(module)


def test_duplicate_type_definition():
    module = ModuleDef(
        body=[TypeDef("A", BaseTypeDesc("u8")), TypeDef("A", BaseTypeDesc("u16"))]
    )
    with pytest.raises(CompileError) as info:
        build_module_abis(module)
    assert str(info.value) == "duplicate type definition"


def test_duplicate_contract_definition():
    module = ModuleDef(body=[ContractDef("Foo"), ContractDef("Foo")])
    with pytest.raises(CompileError) as info:
        build(module)
    assert str(info.value) == "duplicate contract definition"


def test_other_module_statements_are_ignored():
    module = ModuleDef(body=["import something", ContractDef("Empty")])
    assert json.loads(build(module)["Empty"]) == []


def test_two_contracts():
    module = ModuleDef(
        body=[
            ContractDef("Foo", [FuncDef("foo", is_pub=True)]),
            ContractDef("Bar", [FuncDef("bar", is_pub=True)]),
        ]
    )
    abis = build_module_abis(module)
    assert sorted(abis) == ["Bar", "Foo"]
    assert abis["Bar"].functions[0].name == "bar"