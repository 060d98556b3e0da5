"""Build Ethereum JSON ABIs, event topics and function selectors from Fe contract definitions."""

__version__ = "0.1.0"
__all__ = ["builder", "elements", "errors", "signatures", "types"]