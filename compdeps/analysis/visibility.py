"""External visibility propagation.

A file included from outside its component exposes everything it includes
from its own component as well. The flag only ever goes from False to True,
so the worklist below reaches a fixed point.
"""

import logging
from collections import deque

from compdeps.core.model import FileTable

logger = logging.getLogger("compdeps.analysis.visibility")


def propagate_external_includes(files: FileTable) -> int:
    """Mark same-component dependencies of visible files as visible.

    Cross-component edges are not followed.

    Args:
        files: File table after include resolution.

    Returns:
        int: Number of files newly marked as externally visible.
    """
    queue = deque(f for f in files if f.has_external_include)
    marked = 0

    while queue:
        current = queue.popleft()
        for handle in current.dependencies:
            dep = files.get(handle)
            if dep.component != current.component or dep.has_external_include:
                continue
            dep.has_external_include = True
            marked += 1
            queue.append(dep)

    logger.info("Propagated external visibility to %d files", marked)
    return marked


__all__ = ["propagate_external_includes"]
