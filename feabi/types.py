"""Artifacts produced by compiling a module."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class CompiledContract:
    """The artifacts of one compiled contract."""

    json_abi: str
    yul: str
    bytecode: str = ""


@dataclass
class CompiledModule:
    """The artifacts of a compiled module, with its contracts keyed by name."""

    fe_tokens: str
    fe_ast: str
    contracts: dict[str, CompiledContract] = field(default_factory=dict)

    def contract_names(self) -> list[str]:
        """Return the names of the compiled contracts in sorted order."""
        return sorted(self.contracts)