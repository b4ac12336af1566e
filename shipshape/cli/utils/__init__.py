"""CLI utility functions"""

from .output import (
    format_deploy_result,
    format_plan,
    print_error,
)

__all__ = [
    'format_deploy_result',
    'format_plan',
    'print_error',
]
