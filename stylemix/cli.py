"""stylemix command line interface.

Renders a single mixin to stdout, optionally flattened under a selector.

Examples
    $ stylemix arrow top black 50px
    $ stylemix font-size 14px --important -s "h1"
    $ stylemix retina -c "background-image: url(logo@2x.png)" -s .logo
    $ stylemix absolute top 0 right -4px
"""

from __future__ import annotations

import inspect
import logging
import re
from typing import Literal, TypeAlias

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.syntax import Syntax

from stylemix import __version__
from stylemix.css.rules import Block, ruleset
from stylemix.errors import StyleError
from stylemix.mixins import MIXINS

logger = logging.getLogger(__name__)

# Mixins whose first parameter is nested content
NESTED = ("retina", "placeholder")


# Mixin arguments such as `-4px` or `-.5em` that click would otherwise read as short options
NEGATIVE = re.compile(r"^-[\d.]")
ESCAPE = "\0"


class MixinCommand(click.Command):
    """Command that keeps negative numbers and lengths as positional arguments."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        args = [ESCAPE + arg if NEGATIVE.match(arg) else arg for arg in args]
        rest = super().parse_args(ctx, args)
        for name, value in ctx.params.items():
            if isinstance(value, str):
                ctx.params[name] = value.removeprefix(ESCAPE)
            elif isinstance(value, tuple):
                ctx.params[name] = tuple(
                    item.removeprefix(ESCAPE) if isinstance(item, str) else item for item in value
                )
        return rest


def config_console_handler(level: int = logging.WARNING, color: bool = True) -> RichHandler:
    """Configure and return a RichHandler writing to stderr.

    Args:
        level: Minimum level for console output.
        color: Enable color output when True.

    Returns:
        RichHandler: Handler suitable to attach to the root logger.
    """
    ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=level <= logging.DEBUG,
    )
    handler.setFormatter(logging.Formatter(fmt="%(message)s"))
    return handler


def _call_(name: str, args: tuple, kwargs: dict) -> Block:
    """Call the mixin registered as `name`, turning bad arguments into usage errors."""
    mixin = MIXINS[name]
    try:
        inspect.signature(mixin).bind(*args, **kwargs)
    except TypeError as error:
        raise click.UsageError(f"{name}: {error}") from error
    logger.debug("Calling %s with %r %r", name, args, kwargs)
    return mixin(*args, **kwargs)


@click.command(
    cls=MixinCommand,
    context_settings={"help_option_names": ["-h", "--help"], "ignore_unknown_options": True},
)
@click.version_option(__version__, prog_name="stylemix")
@click.argument("mixin", required=False)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.option("--selector", "-s", help="Flatten the output into rules for this selector.")
@click.option(
    "--content",
    "-c",
    help="Declarations nested by retina and placeholder, e.g. 'color: #999'.",
)
@click.option("--important", is_flag=True, help="Mark font-size declarations !important.")
@click.option("--media", help="Media type for retina (default: all).")
@click.option("--list", "list_mixins", is_flag=True, help="List the available mixins and exit.")
@click.option("--plain", is_flag=True, help="Disable syntax highlighting.")
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Increase the default WARNING verbosity by one level per repetition.",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Decrease the default WARNING verbosity by one level per repetition.",
)
def main(  # pylint: disable=too-many-arguments, too-many-locals
    mixin: str | None,
    args: tuple[str, ...],
    selector: str | None,
    content: str | None,
    important: bool,
    media: str | None,
    list_mixins: bool,
    plain: bool,
    verbose_count: int,
    quiet_count: int,
) -> None:
    """Render MIXIN with ARGS as CSS."""

    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))
    logging.basicConfig(
        level=level,
        handlers=[config_console_handler(level=level, color=not plain)],
        force=True,
    )

    if list_mixins:
        for name in MIXINS:
            click.echo(name)
        return

    if mixin is None:
        raise click.UsageError("Missing argument 'MIXIN'. Use --list to see the available mixins.")
    if mixin not in MIXINS:
        raise click.UsageError(f"Unknown mixin {mixin!r}. Use --list to see the available mixins.")

    kwargs: dict[str, object] = {}
    if mixin in NESTED:
        if content is None:
            raise click.UsageError(f"{mixin} needs nested declarations, pass them with --content.")
        args = (content, *args)
    elif content is not None:
        raise click.UsageError(f"{mixin} takes no nested content.")
    if important:
        kwargs["important"] = True
    if media is not None:
        kwargs["media"] = media

    try:
        block = _call_(mixin, args, kwargs)
        text = ruleset(selector, block) if selector else block.render()
    except StyleError as error:
        raise click.ClickException(str(error)) from error

    if len(block) == 0:
        logger.warning("%s produced no declarations", mixin)

    console = Console()
    if plain or not console.is_terminal:
        click.echo(text)
    else:
        console.print(Syntax(text, "css", background_color="default"))
