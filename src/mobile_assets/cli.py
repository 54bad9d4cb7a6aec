import logging
from pathlib import Path

import click

from . import __version__
from .display import Display
from .errors import MobileAssetsError
from .models.run_config import RunConfiguration
from .pipeline import run
from .platforms_loader import load_platforms

logger = logging.getLogger("mobile_assets")


def _resolve_with_cwd(_ctx: click.Context, _param: click.Parameter, value: str) -> Path:
    return Path.cwd() / value


@click.command()
@click.version_option(__version__, prog_name="mobile-assets")
@click.option(
    "--icon",
    "-i",
    default="icon.png",
    show_default=True,
    callback=_resolve_with_cwd,
    help="Base icon used to generate others.",
)
@click.option(
    "--splash",
    "-s",
    default="splash.png",
    show_default=True,
    callback=_resolve_with_cwd,
    help="Base splash screen used to generate others.",
)
@click.option(
    "--config",
    "-c",
    default="config.xml",
    show_default=True,
    callback=_resolve_with_cwd,
    help="Cordova configuration file location.",
)
@click.option(
    "--platforms-config",
    "-P",
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help="Path to platforms.yaml. Defaults: ./platforms.yaml, ~/.config/mobile_assets/platforms.yaml, built-in.",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug-level logging.")
def main(icon: Path, splash: Path, config: Path, platforms_config: str | None, verbose: bool) -> None:
    """Generate icon and splash-screen variants for every installed Cordova platform."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,
    )

    display = Display()
    try:
        descriptors = load_platforms(platforms_config)
        run_config = RunConfiguration(icon=icon, splash=splash, config=config)
        result = run(run_config, descriptors, display=display)
    except MobileAssetsError as exc:
        logger.debug("Run failed", exc_info=True)
        display.error(str(exc))
        click.echo("")
        raise SystemExit(1)

    click.echo("")
    logger.info("Done: %d asset(s) written", len(result.generated))


if __name__ == "__main__":
    main()
