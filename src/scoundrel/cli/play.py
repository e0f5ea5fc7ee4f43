"""CLI command for playing Scoundrel."""

from __future__ import annotations

import logging
import sys

import click

from scoundrel.play.session import MODES, PlaySession, SessionConfig
from scoundrel.simulation.state import STARTING_HP

logger = logging.getLogger(__name__)


@click.command()
@click.option(
    "-m", "--mode",
    type=click.Choice(MODES),
    default="command",
    help="command: type commands like 'w 2'; keys: arrow-key navigation",
)
@click.option("--seed", type=int, default=None, help="Random seed for reproducibility")
@click.option("--hp", type=int, default=STARTING_HP, show_default=True, help="Starting hit points")
@click.option("--clear/--no-clear", default=True, help="Clear the screen between turns")
@click.option("--show-rules/--no-rules", default=True, help="Display rules at start")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(
    mode: str,
    seed: int | None,
    hp: int,
    clear: bool,
    show_rules: bool,
    verbose: bool,
):
    """Play Scoundrel, a dungeon-crawl solitaire, in the terminal."""
    # The board is redrawn in place, so only warnings by default
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        stream=sys.stderr,
    )

    if hp < 1:
        raise click.BadParameter("must be at least 1", param_hint="--hp")

    config = SessionConfig(
        mode=mode,
        seed=seed,
        starting_hp=hp,
        clear_screen=clear,
        show_rules=show_rules,
    )
    session = PlaySession(config)

    try:
        result = session.run()
    except KeyboardInterrupt:
        click.echo("\n\nGame interrupted.")
        sys.exit(130)

    logger.debug(f"Session result: {result}")
    click.echo(f"Seed: {result.seed}  Turns: {result.turns}  HP: {result.hp}")


if __name__ == "__main__":
    main()
