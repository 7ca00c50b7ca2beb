"""CLI entry point for subseek."""

import logging
from pathlib import Path

import click

from .charset import is_utf_charset
from .codepage import resolve_codepage
from .config import Config
from .models import SubtitleFormat, SubtitleTrack
from .shift import shift_subtitles


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """Prepare external subtitles for transcoding from a seek position."""
    try:
        config = Config.from_env()
    except ValueError as e:
        raise click.ClickException(str(e))
    logging.basicConfig(
        level=logging.DEBUG if verbose else config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )
    ctx.obj = config


@main.command()
@click.argument("encoding")
def codepage(encoding: str) -> None:
    """Print the transcoder codepage token for ENCODING."""
    token = resolve_codepage(encoding)
    if token is None:
        raise click.ClickException(f"unresolved: {encoding!r}")
    click.echo(token)


@main.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
def detect(input_path: str) -> None:
    """Detect charset and format of a subtitle file."""
    try:
        track = SubtitleTrack.from_file(input_path)
    except OSError as e:
        raise click.ClickException(str(e))

    click.echo(f"Charset: {track.charset or 'unknown'}")
    click.echo(f"Format: {track.format.value}")
    click.echo(f"Codepage: {resolve_codepage(track.charset) or 'unresolved'}")


@main.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--offset",
    "-s",
    type=float,
    required=True,
    help="Seek offset in seconds",
)
@click.option(
    "--format",
    "subtitle_format",
    type=click.Choice([SubtitleFormat.ASS.value, SubtitleFormat.SUBRIP.value]),
    default=None,
    help="Subtitle format (default: from file extension)",
)
@click.option(
    "--charset",
    default=None,
    help="Charset of the input file (default: auto-detect)",
)
@click.option(
    "--forced-charset",
    default=None,
    help="Override the configured forced subtitle codepage",
)
@click.option(
    "--utf",
    is_flag=True,
    help="Input is already UTF encoded",
)
@click.pass_obj
def shift(
    config: Config,
    input_path: str,
    offset: float,
    subtitle_format: str | None,
    charset: str | None,
    forced_charset: str | None,
    utf: bool,
) -> None:
    """Rewrite INPUT_PATH as UTF-8 with timestamps rebased to --offset.

    \b
    Examples:
      subseek shift movie.srt --offset 300
      subseek shift episode.ass --offset 42.5 --charset Windows-1251
    """
    if forced_charset is not None:
        config.subtitles_codepage = forced_charset

    try:
        if charset is None:
            track = SubtitleTrack.from_file(input_path)
        else:
            track = SubtitleTrack(
                path=Path(input_path),
                format=SubtitleFormat.from_path(input_path),
                charset=charset,
                is_utf=is_utf_charset(charset),
            )
        if subtitle_format is not None:
            track.format = SubtitleFormat(subtitle_format)
        if utf:
            track.is_utf = True

        output = shift_subtitles(track, offset, config)
    except (OSError, ValueError) as e:
        raise click.ClickException(str(e))

    click.echo(output if output is not None else "no output")


if __name__ == "__main__":
    main()
