"""Deploy service implementation"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from rich.console import Console

from ..api.exceptions import CopyError, ShipshapeError, SourceNotFoundError
from ..constants import (
    DeployPhase,
    MSG_DEPLOY_START,
    MSG_DEPLOY_SUCCESS,
    MSG_DEPLOY_FAILED,
    MSG_PRE_DEPLOY_START,
    MSG_PRE_DEPLOY_END,
    MSG_PRE_DEPLOY_NONE,
    MSG_COPY_START,
    MSG_COPY_END,
    MSG_POST_DEPLOY_START,
    MSG_POST_DEPLOY_END,
    MSG_POST_DEPLOY_NONE,
    MSG_PRESERVING,
    MSG_REMOVING,
)
from ..core.command_runner import CommandExecutor, ShellCommandExecutor
from ..core.path_classifier import NetworkPathPredicate, is_network_path
from ..core.path_resolver import PathResolver
from ..core.reconciler import DirectoryReconciler
from ..models import DeploymentConfig, DeployResult, OperationStatus, PhaseResult
from ..utils.async_utils import sync_to_async
from ..utils.file_utils import copy_tree, is_same_or_inside
from ..utils.output import console as default_console

logger = logging.getLogger(__name__)

copy_tree_async = sync_to_async(copy_tree)


class DeployService:
    """Runs the pre-deploy, reconcile/copy and post-deploy phases

    Phases run strictly in order and the first error moves the run to the
    failed state; nothing after it is attempted and nothing already done
    is undone.
    """

    def __init__(self,
                 executor: Optional[CommandExecutor] = None,
                 reconciler: Optional[DirectoryReconciler] = None,
                 network_path: NetworkPathPredicate = is_network_path,
                 console: Optional[Console] = None):
        """Initialize deploy service

        Args:
            executor: Runs pre/post-deploy commands
            reconciler: Empties the destination
            network_path: Decides whether a destination is a network path
            console: Console for phase markers
        """
        self.console = console or default_console
        self.executor = executor or ShellCommandExecutor(console=self.console)
        self.reconciler = reconciler or DirectoryReconciler()
        self.network_path = network_path

    async def deploy(self, config: DeploymentConfig,
                     cwd: Optional[Union[str, Path]] = None) -> DeployResult:
        """Deploy according to an effective configuration

        Args:
            config: Validated effective configuration
            cwd: Invocation root (defaults to the current directory)

        Returns:
            DeployResult describing every phase reached; on failure it
            carries the error and the phase that raised it
        """
        resolver = PathResolver(cwd)
        result = DeployResult(status=OperationStatus.IN_PROGRESS)

        self._print(MSG_DEPLOY_START)

        try:
            source_path, destination_path = self._resolve_paths(config, resolver, result)
            await self._pre_deploy(config, resolver, result)
            await self._reconcile(config, destination_path, result)
            await self._copy(source_path, destination_path, result)
            await self._post_deploy(config, resolver, destination_path, result)
        except ShipshapeError as e:
            logger.debug(f"Deployment failed during {result.state.value}: {e}")
            result.fail(e)
            self._print(f"\n{MSG_DEPLOY_FAILED}", style="red")
            self._print(f"Error: {e}", style="red")
            return result

        result.succeed()
        self._print(MSG_DEPLOY_SUCCESS, style="green")
        return result

    async def _pre_deploy(self, config: DeploymentConfig, resolver: PathResolver,
                          result: DeployResult) -> None:
        phase = result.begin_phase(DeployPhase.PRE_DEPLOY)

        if not config.pre_deploy:
            self._print(MSG_PRE_DEPLOY_NONE)
            phase.status = OperationStatus.SKIPPED
            return

        self._print(f"\n{MSG_PRE_DEPLOY_START}")
        await self._run_commands(config.pre_deploy, resolver.invocation_root, phase)
        self._print(f"{MSG_PRE_DEPLOY_END}\n")

    def _resolve_paths(self, config: DeploymentConfig, resolver: PathResolver,
                       result: DeployResult):
        source_path = resolver.resolve_source(config.source)
        destination_path = resolver.resolve_destination(config.destination)
        result.source_path = str(source_path)
        result.destination_path = str(destination_path)

        if not source_path.exists():
            raise SourceNotFoundError(str(source_path))
        if not source_path.is_dir():
            raise SourceNotFoundError(str(source_path), "is not a directory")
        if is_same_or_inside(destination_path, source_path):
            raise CopyError(str(source_path), str(destination_path),
                            "cannot copy a directory into itself or a subdirectory of itself")

        return source_path, destination_path

    async def _reconcile(self, config: DeploymentConfig, destination_path: Path,
                         result: DeployResult) -> None:
        phase = result.begin_phase(DeployPhase.RECONCILE)

        self._print(f"\n{MSG_COPY_START}")
        self._print(f"From: {result.source_path}")
        self._print(f"To:   {destination_path}")

        keep_set = config.keep_set
        self._print(MSG_PRESERVING.format(count=len(keep_set), names=", ".join(sorted(keep_set))))

        summary = await self.reconciler.reconcile(destination_path, keep_set)
        result.kept = list(summary.kept)
        result.removed = list(summary.removed)

        self._print(MSG_REMOVING.format(count=len(summary.removed)))
        phase.status = OperationStatus.SUCCESS

    async def _copy(self, source_path: Path, destination_path: Path,
                    result: DeployResult) -> None:
        phase = result.begin_phase(DeployPhase.COPY)

        try:
            copied = await copy_tree_async(source_path, destination_path)
        except OSError as e:
            raise CopyError(str(source_path), str(destination_path), str(e)) from e

        logger.debug(f"Copied {copied} files into {destination_path}")
        phase.status = OperationStatus.SUCCESS
        phase.message = f"{copied} files copied"
        self._print("Files copied successfully.")
        self._print(f"{MSG_COPY_END}\n")

    async def _post_deploy(self, config: DeploymentConfig, resolver: PathResolver,
                           destination_path: Path, result: DeployResult) -> None:
        phase = result.begin_phase(DeployPhase.POST_DEPLOY)

        if not config.post_deploy:
            self._print(MSG_POST_DEPLOY_NONE)
            phase.status = OperationStatus.SKIPPED
            return

        self._print(f"\n{MSG_POST_DEPLOY_START}")
        post_deploy_cwd = self.post_deploy_cwd(config, resolver.invocation_root, destination_path)
        result.post_deploy_cwd = str(post_deploy_cwd)

        await self._run_commands(config.post_deploy, post_deploy_cwd, phase)
        self._print(f"{MSG_POST_DEPLOY_END}\n")

    def post_deploy_cwd(self, config: DeploymentConfig, invocation_root: Path,
                        destination_path: Path) -> Path:
        """Directory post-deploy commands run in

        Commands cannot use a network share as their working directory,
        so they run from the invocation root instead.
        """
        if self.network_path(config.destination):
            return invocation_root
        return destination_path

    async def _run_commands(self, commands: List[str], cwd: Path, phase: PhaseResult) -> None:
        for command in commands:
            phase.commands.append(command)
            await self.executor.run(command, cwd)
        phase.status = OperationStatus.SUCCESS

    def _print(self, message: str, style: Optional[str] = None) -> None:
        self.console.print(message, style=style, markup=False, highlight=False)
