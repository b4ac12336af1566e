"""Deployer API for deployment operations"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

from rich.console import Console

from ..core.command_runner import CommandExecutor
from ..core.path_classifier import NetworkPathPredicate, is_network_path
from ..models import DeploymentConfig, DeployResult, parse_raw_config
from ..services.config_service import ConfigService
from ..services.deploy_service import DeployService
from ..utils.async_utils import run_async


class Deployer:
    """Deployer class for deployment operations"""

    def __init__(self,
                 project_root: Optional[Union[str, Path]] = None,
                 config_file: Optional[Union[str, Path]] = None,
                 executor: Optional[CommandExecutor] = None,
                 network_path: NetworkPathPredicate = is_network_path,
                 console: Optional[Console] = None):
        """
        Initialize deployer

        Args:
            project_root: Invocation root; source paths and pre-deploy
                commands are relative to it (defaults to the current directory)
            config_file: Configuration file (defaults to shipshape.config.json)
            executor: Command executor override
            network_path: Network path predicate override
            console: Console for progress output
        """
        self.config_service = ConfigService(project_root, config_file)
        self.deploy_service = DeployService(
            executor=executor,
            network_path=network_path,
            console=console
        )

    @property
    def project_root(self) -> Path:
        return self.config_service.project_root

    def resolve(self, environment: Optional[str] = None) -> DeploymentConfig:
        """
        Resolve the effective configuration for an environment

        Args:
            environment: Environment name (any case) or None for defaults

        Returns:
            DeploymentConfig: Validated effective configuration

        Raises:
            ConfigError: If the configuration is missing, malformed or invalid
        """
        return self.config_service.resolve(environment)

    def deploy(self, environment: Optional[str] = None) -> DeployResult:
        """
        Deploy using the configuration file

        Args:
            environment: Environment name (any case) or None for defaults

        Returns:
            DeployResult: Deployment result

        Raises:
            ConfigError: If the configuration is missing, malformed or invalid
        """
        return self.deploy_config(self.resolve(environment))

    def deploy_config(self, config: DeploymentConfig) -> DeployResult:
        """
        Deploy an already resolved configuration

        Args:
            config: Effective configuration

        Returns:
            DeployResult: Deployment result
        """
        return run_async(self.deploy_service.deploy(config, self.project_root))

    async def deploy_async(self, environment: Optional[str] = None) -> DeployResult:
        """Async variant of deploy()"""
        return await self.deploy_service.deploy(self.resolve(environment), self.project_root)


def deploy(config: Optional[Union[DeploymentConfig, Dict[str, Any]]] = None,
           environment: Optional[str] = None,
           project_root: Optional[Union[str, Path]] = None,
           **kwargs) -> DeployResult:
    """
    Convenience function for deploying

    Args:
        config: Effective configuration, a flat configuration dictionary,
            or None to read the configuration file
        environment: Environment name when reading the configuration file
        project_root: Invocation root
        **kwargs: Passed to Deployer

    Returns:
        DeployResult: Deployment result

    Examples:
        >>> deploy(environment="prod")
        >>> deploy({"source": "dist", "destination": "C:\\\\inetpub\\\\app"})
    """
    deployer = Deployer(project_root=project_root, **kwargs)

    if config is None:
        return deployer.deploy(environment)

    if isinstance(config, dict):
        config = deployer.config_service.resolver.resolve(
            parse_raw_config(config), environment
        )

    return deployer.deploy_config(config)
