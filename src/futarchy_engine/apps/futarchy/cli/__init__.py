"""CLI subpackage for the futarchy pricing and settlement engine.

Create the Typer application and register all command modules.
"""

import typer

from futarchy_engine.apps.futarchy.cli.arbitrage_cmd import arbitrage
from futarchy_engine.apps.futarchy.cli.full_set_cmd import mint, redeem
from futarchy_engine.apps.futarchy.cli.resolve_cmd import preview, resolve
from futarchy_engine.apps.futarchy.cli.state_cmd import state
from futarchy_engine.apps.futarchy.cli.trade_cmd import trade

app = typer.Typer(help="Futarchy outcome pricing and settlement tools")

app.command()(state)
app.command()(arbitrage)
app.command()(mint)
app.command()(redeem)
app.command()(trade)
app.command()(resolve)
app.command()(preview)

__all__ = ["app"]
