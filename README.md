# feabi

Builds Ethereum JSON ABIs from the definitions in a Fe contract module.

A module is described with plain Python objects: type definitions, contracts,
their functions, events and storage fields. `feabi` resolves type aliases, maps
Fe types to ABI types (`u256` becomes `uint256`, `u8[10]` becomes `uint8[10]`,
`bytes[100]` becomes `bytes100`, any base name starting with `string` becomes
`string`, tuples become `(…)`) and serialises each contract to its JSON ABI.

## Installation

```
pip install .
```

## Usage

```python
from feabi.builder import (
    BaseTypeDesc, ArrayTypeDesc, FuncArg, FuncDef,
    EventFieldDef, EventDef, ContractDef, ModuleDef, build,
)

module = ModuleDef(body=[
    ContractDef(name="Foo", body=[
        EventDef(name="Food", fields=[
            EventFieldDef(name="barge", typ=BaseTypeDesc("u256"), indexed=True),
        ]),
        FuncDef(name="__init__", is_pub=True,
                args=[FuncArg(name="x", typ=BaseTypeDesc("address"))]),
        FuncDef(name="bar", is_pub=True,
                args=[FuncArg(name="x", typ=BaseTypeDesc("u256"))],
                return_type=ArrayTypeDesc(BaseTypeDesc("u256"), 10)),
    ]),
])

abis = build(module)   # {"Foo": "<JSON ABI, indented by 2 spaces>"}
```

How a module becomes ABIs:

- Only functions with `is_pub=True` are included. A function named `__init__`
  becomes the constructor, with an empty name.
- A function whose return type is the empty tuple (`TupleTypeDesc()`) has no
  outputs; any other return type gives one unnamed output.
- Events are always included; `ContractField` entries are ignored.
- `TypeDef` aliases apply to the contracts that follow them in the module body.
- In each ABI the events come first, then the functions, each in definition order.

`feabi.errors.CompileError` is raised for a map type (`MapTypeDesc`), an
unknown base type, a duplicate type definition or a duplicate contract name.
`str()` of the error gives its first message.

For the structured form rather than JSON, `feabi.builder.build_module_abis(module)`
returns a `feabi.elements.Contract` for each contract name, and
`feabi.builder.resolve_type(type_defs, typ)` maps a single type description.
`Contract.to_abi()` gives the list of ABI mappings and `Contract.json(prettify)`
serialises it, compactly or indented.

## Signatures

```python
from feabi.signatures import event_topic, func_selector, keccak_partial

func_selector("transfer", ["address", "uint256"])   # "0xa9059cbb"
event_topic("Transfer", ["address", "address", "uint256"])
```

Both hash the canonical signature `name(type1,type2,…)` with Keccak-256 and
return the leading 4 (selectors) or 32 (topics) bytes as `0x`-prefixed
lowercase hex. `keccak_partial(data, size)` does the same for any bytes, with
`size` between 0 and 32.

## Result containers

`feabi.types` holds `CompiledContract` (`json_abi`, `yul`, `bytecode`) and
`CompiledModule` (`fe_tokens`, `fe_ast`, `contracts`, and `contract_names()`
for the sorted names). They are plain data holders.

## What this package does not do

It does not read Fe source text: there is no tokenizer or parser, so modules
must be built from the classes in `feabi.builder`. It performs no semantic
analysis and does not generate Yul or bytecode; nothing in the package fills
in a `CompiledModule`. There is no command-line tool.

## Running the tests

```
pip install .[test]
pytest
```