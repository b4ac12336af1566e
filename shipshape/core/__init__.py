"""Core functionality for shipshape"""

from .config_resolver import ConfigResolver, resolve_config
from .path_classifier import is_network_path
from .path_resolver import PathResolver
from .reconciler import DirectoryReconciler, ReconcileSummary
from .command_runner import CommandExecutor, ShellCommandExecutor

__all__ = [
    "ConfigResolver",
    "resolve_config",
    "is_network_path",
    "PathResolver",
    "DirectoryReconciler",
    "ReconcileSummary",
    "CommandExecutor",
    "ShellCommandExecutor",
]
