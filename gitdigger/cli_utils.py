"""
Common CLI utilities and decorators for consistent command behavior.
"""

import click

from .format_utils import FORMATS


# Standard options shared by gitdigger commands
common_options = {
    'verbose': click.option('-v', '--verbose', is_flag=True,
                           help='Show debug log output'),
    'quiet': click.option('-q', '--quiet', is_flag=True,
                         help='Suppress data output and informational logs'),
    'format': click.option('-f', '--format', 'output_format',
                         type=click.Choice(FORMATS),
                         help='Print the result as structured data'),
}


def add_common_options(*option_names):
    """
    Decorator to add common options to a command.

    Example:
        @add_common_options('verbose', 'quiet')
        def my_command(verbose, quiet):
            ...
    """
    def decorator(func):
        for name in reversed(option_names):
            if name in common_options:
                func = common_options[name](func)
        return func
    return decorator
