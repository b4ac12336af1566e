"""Destination directory reconciliation"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import AbstractSet, List, Union

import aiofiles.os

from ..api.exceptions import ReconcileError
from ..models.config import canonical_name
from ..utils.async_utils import sync_to_async
from ..utils.file_utils import remove_path

logger = logging.getLogger(__name__)

remove_path_async = sync_to_async(remove_path)


@dataclass
class ReconcileSummary:
    """Entries kept and removed by a reconcile pass"""

    path: Path
    kept: List[str] = field(default_factory=list)
    removed: List[str] = field(default_factory=list)


class DirectoryReconciler:
    """Empties a directory except for entries on a keep list"""

    async def reconcile(self, dir_path: Union[str, Path],
                        keep_set: AbstractSet[str] = frozenset()) -> ReconcileSummary:
        """Remove every immediate entry of dir_path not named in keep_set

        The directory is created (with parents) when missing. Names are
        compared in canonical case, so ``keep_set`` must already be
        canonical. Keep tokens that match nothing are ignored.

        Args:
            dir_path: Directory to empty
            keep_set: Canonical-case basenames to preserve

        Returns:
            Summary of kept and removed entry names

        Raises:
            ReconcileError: If the directory cannot be created or listed,
                or on the first entry that cannot be removed
        """
        dir_path = Path(dir_path)
        summary = ReconcileSummary(path=dir_path)

        try:
            await aiofiles.os.makedirs(dir_path, exist_ok=True)
            entries = sorted(await aiofiles.os.listdir(dir_path))

            for name in entries:
                if canonical_name(name) in keep_set:
                    summary.kept.append(name)
                else:
                    summary.removed.append(name)

            for name in summary.removed:
                logger.debug(f"Removing {dir_path / name}")
                await remove_path_async(dir_path / name)

        except OSError as e:
            raise ReconcileError(str(dir_path), str(e)) from e

        return summary
