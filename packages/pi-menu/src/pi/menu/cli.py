"""CLI entry point for pi-menu. Uses Click for argument parsing."""

from __future__ import annotations

import io
import logging
import sys

import click

from pi.menu.config import (
    NO_BORDER,
    PLAIN_FONT,
    MenuConfig,
    config_from_dict,
    config_to_dict,
    get_config_path,
    load_config,
    save_config,
)
from pi.menu.screen_buffer import TerminalSizeUnavailable
from pi.menu.style import RESET_ALL

_LOG_LEVELS = ["debug", "info", "warning", "error"]


def _configure_logging(level: str) -> None:
    # Frames go to stdout, so logs must stay on stderr.
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


@click.group(invoke_without_command=True)
@click.option("--log-level", type=click.Choice(_LOG_LEVELS), default=None, help="Logging verbosity")
@click.pass_context
def main(ctx, log_level):
    """Colored block-font banners and keyboard-driven terminal menus."""
    config = load_config()
    _configure_logging(log_level or config.log_level)
    ctx.obj = config
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# ---------------------------------------------------------------------------
# Fonts / banners
# ---------------------------------------------------------------------------


@main.command()
def fonts():
    """List the built-in block fonts."""
    from pi.menu.glyphs import available_fonts, get_font

    for name in available_fonts():
        font = get_font(name)
        click.echo(f"{name:<12} {len(font):>3} glyphs  {''.join(font.chars())}")


@main.command()
@click.argument("text")
@click.option("--font", default=None, help="Block font name (see 'pi-menu fonts')")
@click.option("--gradient", default=None, help="Title gradient: default, rainbow, sine, purple")
@click.option("--border", default=None, help="Frame style: double, single, rounded or none")
@click.option("--width", type=int, default=None, help="Frame width (default: fit the text)")
@click.option("--height", type=int, default=None, help="Frame height (default: fit the text)")
@click.pass_obj
def banner(config: MenuConfig, text, font, gradient, border, width, height):
    """Render TEXT as a single full frame on stdout."""
    from pi.menu.compositor import draw_title, measure
    from pi.menu.decorators import BORDERS, decorate, linear_ramp
    from pi.menu.glyphs import available_fonts, get_font
    from pi.menu.gradients import GRADIENTS, as_uv
    from pi.menu.screen_buffer import ScreenBuffer

    font_name = (font or config.font).lower()
    if font_name == PLAIN_FONT:
        raise click.BadParameter("banners need a block font", param_hint="--font")
    if font_name not in available_fonts():
        raise click.BadParameter(f"unknown font {font_name!r}", param_hint="--font")
    gradient_name = gradient or config.gradient
    if gradient_name not in GRADIENTS:
        raise click.BadParameter(f"unknown gradient {gradient_name!r}", param_hint="--gradient")
    border_name = border or config.border
    if border_name != NO_BORDER and border_name not in BORDERS:
        raise click.BadParameter(f"unknown border {border_name!r}", param_hint="--border")

    block_font = get_font(font_name)
    metrics = measure(text, block_font)
    padding = config.top_padding + (1 if border_name != NO_BORDER else 0)
    try:
        buffer = ScreenBuffer(
            width or metrics.width + 2 * padding,
            height or metrics.height + 2 * padding,
        )
    except TerminalSizeUnavailable as e:
        click.echo(f"Cannot render an empty banner ({e})", err=True)
        sys.exit(1)

    if border_name != NO_BORDER:
        decorate(buffer, BORDERS[border_name], linear_ramp)
    draw_title(buffer, text, block_font, padding, as_uv(GRADIENTS[gradient_name]))
    frame = io.StringIO()
    buffer.render_full(frame)
    click.echo(frame.getvalue())


@main.command()
@click.argument("text")
@click.option("--font", default=None, help="Block font name")
@click.option("--frames", type=int, default=40, show_default=True, help="Number of frames")
@click.option("--interval", type=float, default=None, help="Seconds between frames")
@click.pass_obj
def animate(config: MenuConfig, text, font, frames, interval):
    """Scroll a rainbow across TEXT in the terminal."""
    from pi.menu.animation import animate_title
    from pi.menu.glyphs import DEFAULT_FONT, get_font
    from pi.menu.screen_buffer import ScreenBuffer
    from pi.menu.terminal import ProcessTerminal

    terminal = ProcessTerminal()
    try:
        buffer = ScreenBuffer.for_terminal(terminal)
    except TerminalSizeUnavailable as e:
        click.echo(str(e), err=True)
        sys.exit(1)

    font_name = font or config.font
    terminal.hide_cursor()
    try:
        animate_title(
            buffer,
            terminal,
            text,
            get_font(DEFAULT_FONT if font_name == PLAIN_FONT else font_name),
            frames=frames,
            interval=config.frame_interval if interval is None else interval,
            top=config.top_padding,
        )
    finally:
        terminal.write(RESET_ALL)
        terminal.show_cursor()
    click.echo()


# ---------------------------------------------------------------------------
# Interactive menu
# ---------------------------------------------------------------------------


@main.command()
@click.pass_obj
def demo(config: MenuConfig):
    """Run the interactive slot machine menu."""
    from pi.menu.demo import build_demo
    from pi.menu.menu import MenuApp
    from pi.menu.terminal import ProcessTerminal

    app = build_demo(MenuApp(ProcessTerminal(), config=config))
    try:
        app.run()
    except TerminalSizeUnavailable as e:
        click.echo(str(e), err=True)
        sys.exit(1)
    finally:
        click.echo(RESET_ALL, nl=False)


@main.command()
@click.argument("sender")
@click.argument("text")
def message(sender, text):
    """Print a chat line with SENDER in its own stable color."""
    from pi.menu.style import format_message

    click.echo(format_message(sender, text))


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------


@main.command("config")
@click.argument("key", required=False)
@click.argument("value", required=False)
@click.pass_obj
def config_command(config: MenuConfig, key, value):
    """Show the config, or set KEY to VALUE and save it."""
    if key is None:
        click.echo(f"# {get_config_path()}")
        for name, current in config_to_dict(config).items():
            click.echo(f"{name} = {current}")
        return

    data = config_to_dict(config)
    if key not in data:
        raise click.BadParameter(f"unknown key {key!r}", param_hint="KEY")
    if value is None:
        click.echo(data[key])
        return

    data[key] = value
    try:
        updated = config_from_dict(data)
        path = save_config(updated)
    except (TypeError, ValueError) as e:
        click.echo(str(e), err=True)
        sys.exit(1)
    click.echo(f"Saved {key} = {value} to {path}")
