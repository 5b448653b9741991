"""
PatchApplier - Applies PropPatch to component nodes.

Patches are merged shallowly into the node's props (``dict.update``).
Non-destruction is guaranteed by how rules build patches; the applier
only refuses nodes whose props are not a mapping.

Usage:
    applier = PatchApplier()
    if applier.apply(node, patch):
        ...
"""

import logging
from typing import Optional

from layout_repair.core.config import settings

from ..contracts.nodes import ComponentNode, get_props, raw_node_id
from ..contracts.patches import PatchSet, PropPatch


logger = logging.getLogger(__name__)


class PatchApplier:
    """
    Merges prop patches into nodes in place.

    Features:
    - Skips empty patches
    - Attaches a props mapping to nodes that have none
    - Leaves nodes with malformed props untouched
    - Optionally records applied patches into a PatchSet
    """

    def __init__(self, log_patches: Optional[bool] = None):
        """
        Initialize the applier.

        Args:
            log_patches: Log each applied patch at INFO instead of DEBUG
                         (defaults to settings.REPAIR_LOG_PATCHES)
        """
        self._log_level = (
            logging.INFO
            if (settings.REPAIR_LOG_PATCHES if log_patches is None else log_patches)
            else logging.DEBUG
        )

    def apply(
        self,
        node: ComponentNode,
        patch: PropPatch,
        patch_set: Optional[PatchSet] = None,
    ) -> bool:
        """
        Apply one patch to a node.

        Args:
            node: Target node, mutated in place
            patch: Patch to merge
            patch_set: Optional collector for applied patches

        Returns:
            True if the node's props changed
        """
        if patch.is_empty():
            return False

        props = get_props(node)
        if props is None:
            logger.debug(f"Skipping patch for {raw_node_id(node)!r}: props is not a mapping")
            return False

        props.update(patch.values)
        if patch_set is not None:
            patch_set.add(patch)

        logger.log(self._log_level, f"[{patch.rule or 'patch'}] {patch.describe()}")
        return True
