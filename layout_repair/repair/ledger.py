"""
RestructureLedger - Per-run memo of restructured navbars.

Remembers which navigation nodes were already restructured during one
repair run, so a second visit never wraps an already-wrapped links
container again. A ledger lives for exactly one run: project runs
create their own, per-tree calls share the session ledger held in a
ContextVar until ``reset_session_ledger`` replaces it.
"""

from contextvars import ContextVar
from typing import Any, Optional, Set, Union

from .contracts.nodes import node_id

LedgerKey = Union[str, int]


class RestructureLedger:
    """
    Set of navbar keys processed in the current run.

    The key is the lower-cased node id. A navbar without an id is keyed
    by object identity, which is only meaningful while the run holds
    the tree.
    """

    def __init__(self):
        self._keys: Set[LedgerKey] = set()

    @staticmethod
    def key_for(node: Any) -> LedgerKey:
        return node_id(node) or id(node)

    def record(self, node: Any) -> None:
        """Mark a navbar as processed."""
        self._keys.add(self.key_for(node))

    def clear(self) -> None:
        self._keys.clear()

    def __contains__(self, node: Any) -> bool:
        return self.key_for(node) in self._keys

    def __len__(self) -> int:
        return len(self._keys)

    def __repr__(self) -> str:
        return f"RestructureLedger({len(self._keys)} navbars)"


_session_ledger: ContextVar[Optional[RestructureLedger]] = ContextVar(
    "layout_repair_session_ledger",
    default=None,
)


def session_ledger() -> RestructureLedger:
    """Ledger shared by per-tree calls in the current context."""
    ledger = _session_ledger.get()
    if ledger is None:
        ledger = RestructureLedger()
        _session_ledger.set(ledger)
    return ledger


def reset_session_ledger() -> RestructureLedger:
    """Start a fresh session ledger and return it."""
    ledger = RestructureLedger()
    _session_ledger.set(ledger)
    return ledger
