"""Release helpers for file handles and engine workbooks."""

import logging
from typing import Any

logger = logging.getLogger(__name__)


def release(*resources: Any) -> None:
    """
    Close each resource in order, skipping None.

    A failing close() is logged and does not stop the remaining resources
    from being closed. Nothing is raised, so a release failure never hides
    the outcome of the operation that owned the resources.

    Args:
        resources: Objects with a close() method, or None.
    """
    for resource in resources:
        if resource is None:
            continue
        try:
            resource.close()
        except Exception:
            logger.warning(
                "%s.close() failed",
                type(resource).__name__,
                exc_info=True,
            )
