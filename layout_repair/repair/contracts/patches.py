"""
Patches - Data structures for prop modifications.

PropPatch is the atomic unit of tree repair in this system. Rules never
write to a node directly: they build a patch that only carries keys
whose write is a real change, and the PatchApplier merges it into the
node's props. A key that holds a concrete, intentional value never
makes it into a patch built with ``default``.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

PlaceholderCheck = Callable[[Any], bool]


def is_empty_value(value: Any) -> bool:
    """Check if a prop value counts as "not set"."""
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, (dict, list)):
        return len(value) == 0
    return False


@dataclass
class PropPatch:
    """
    A patch that sets top-level props on one component node.

    Example:
        patch = PropPatch(node_id="footer", reason="Footer section defaults")
        patch.default(props, "gap", "48px")
        patch.force(props, "display", "grid")
    """

    node_id: str
    """Id of the target node (as authored)."""

    values: Dict[str, Any] = field(default_factory=dict)
    """Top-level prop keys to write, merged shallowly into props."""

    reason: Optional[str] = None
    """Optional explanation of why this patch is needed."""

    rule: Optional[str] = None
    """Name of the rule that produced the patch."""

    # -------------------------------------------------------------------------
    # Builders
    # -------------------------------------------------------------------------

    def _current(self, props: Dict[str, Any], key: str) -> Any:
        if key in self.values:
            return self.values[key]
        return props.get(key)

    def default(
        self,
        props: Dict[str, Any],
        key: str,
        value: Any,
        placeholder: Optional[PlaceholderCheck] = None,
    ) -> bool:
        """
        Record ``key`` only if its current value is unset.

        Args:
            props: Current props of the node
            key: Prop name
            value: Value to write
            placeholder: Predicate for sentinel values that also count as unset

        Returns:
            True if the key was recorded
        """
        current = self._current(props, key)
        if is_empty_value(current) or (placeholder is not None and placeholder(current)):
            if current != value:
                self.values[key] = value
                return True
        return False

    def force(self, props: Dict[str, Any], key: str, value: Any) -> bool:
        """Record ``key`` if its current value differs from ``value``."""
        if self._current(props, key) != value:
            self.values[key] = value
            return True
        return False

    def _sub_mapping(self, props: Dict[str, Any], key: str) -> Dict[str, Any]:
        current = self._current(props, key)
        return dict(current) if isinstance(current, dict) else {}

    def default_nested(
        self,
        props: Dict[str, Any],
        key: str,
        subkey: str,
        value: Any,
        placeholder: Optional[PlaceholderCheck] = None,
    ) -> bool:
        """
        Record ``key.subkey`` only if it is unset.

        The recorded value is a copy of the existing sub-mapping with the
        one sub-key merged in, so sibling sub-keys survive the shallow merge.
        A sub-mapping that is not a dict is treated as unset.
        """
        sub = self._sub_mapping(props, key)
        current = sub.get(subkey)
        if is_empty_value(current) or (placeholder is not None and placeholder(current)):
            if current != value:
                sub[subkey] = value
                self.values[key] = sub
                return True
        return False

    def force_nested(
        self, props: Dict[str, Any], key: str, subkey: str, value: Any
    ) -> bool:
        """Record ``key.subkey`` if it differs from ``value``."""
        sub = self._sub_mapping(props, key)
        if sub.get(subkey) != value:
            sub[subkey] = value
            self.values[key] = sub
            return True
        return False

    # -------------------------------------------------------------------------
    # Inspection
    # -------------------------------------------------------------------------

    def is_empty(self) -> bool:
        """Check if the patch changes nothing."""
        return len(self.values) == 0

    @property
    def keys(self) -> List[str]:
        """Prop keys touched by this patch."""
        return list(self.values.keys())

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization."""
        result = {"node_id": self.node_id, "set": dict(self.values)}
        if self.reason:
            result["reason"] = self.reason
        if self.rule:
            result["rule"] = self.rule
        return result

    @classmethod
    def from_dict(cls, data: Dict) -> "PropPatch":
        """Create from dictionary."""
        return cls(
            node_id=data["node_id"],
            values=dict(data.get("set", {})),
            reason=data.get("reason"),
            rule=data.get("rule"),
        )

    def describe(self) -> str:
        """Generate human-readable description of the patch."""
        description = f"{self.node_id or '<no id>'} -> set {', '.join(self.keys)}"
        if self.reason:
            description += f" ({self.reason})"
        return description

    def merge_with(self, other: "PropPatch") -> "PropPatch":
        """
        Merge with another patch for the same node.

        Later values win on key conflicts.
        """
        if self.node_id != other.node_id:
            raise ValueError("Cannot merge patches for different nodes")

        return PropPatch(
            node_id=self.node_id,
            values={**self.values, **other.values},
            reason=other.reason or self.reason,
            rule=other.rule or self.rule,
        )


@dataclass
class PatchSet:
    """
    A collection of patches applied during one repair run.

    Used for reporting; patches are already applied when they land here.
    """

    patches: List[PropPatch] = field(default_factory=list)
    """Patches in application order."""

    source: str = "unknown"
    """Source of these patches (e.g. 'footer', 'navbar', 'layout')."""

    def add(self, patch: PropPatch) -> None:
        """Add a patch."""
        self.patches.append(patch)

    def get_for_node(self, node_id: str) -> Optional[PropPatch]:
        """Merged view of every patch applied to one node id."""
        merged = None
        for patch in self.patches:
            if patch.node_id == node_id:
                merged = patch if merged is None else merged.merge_with(patch)
        return merged

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization."""
        return {
            "source": self.source,
            "patches": [p.to_dict() for p in self.patches],
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "PatchSet":
        """Create from dictionary."""
        return cls(
            source=data.get("source", "unknown"),
            patches=[PropPatch.from_dict(p) for p in data.get("patches", [])],
        )

    def describe(self) -> str:
        """Generate human-readable description of all patches."""
        lines = [f"PatchSet ({self.source}): {len(self.patches)} patches"]
        for i, patch in enumerate(self.patches, 1):
            lines.append(f"  {i}. {patch.describe()}")
        return "\n".join(lines)

    def __len__(self) -> int:
        return len(self.patches)

    def __iter__(self):
        return iter(self.patches)
