"""
Interactive console menu: add rooms, list them, show the average cost.
Domain errors are reported and the menu is shown again; only choice 0 ends the run.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional

import typer

from hotel_rooms.core import Application, HotelConfig, load_config_from_env
from hotel_rooms.domain import HotelError
from hotel_rooms.rooms import AddRoom, GetAverageFinalCost, ListRooms, rooms_module
from hotel_rooms.cli.validation import (
    Reader,
    prompt_discount_percent,
    prompt_menu_choice,
    prompt_non_empty_string,
    prompt_positive_real,
    read_line,
)

logger = logging.getLogger(__name__)

app = typer.Typer(help="Hotel rooms: record nightly costs and discounts, show the average.", add_completion=False)

MENU = """
===== HOTEL ROOMS MENU =====
1. Add room
2. Show all rooms
3. Average cost (after discounts)
0. Exit
============================"""

EXIT, ADD, SHOW, AVERAGE = 0, 1, 2, 3


def build_application(config: HotelConfig | None = None) -> Application:
    """Application with the rooms context registered; state lives for the life of the object."""
    return Application(config=config).register(rooms_module)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _add_room(hotel: Application, read: Reader) -> None:
    identifier = prompt_non_empty_string("Room identifier (e.g. 101, A-12): ", read)
    base_cost = prompt_positive_real("Base cost per night: ", hotel.config.max_base_cost, read)
    discount = prompt_discount_percent("Discount percent (0 for none, <100): ", read)
    hotel.dispatch(AddRoom(identifier, base_cost, discount))
    typer.echo("Room added.")


def _show_rooms(hotel: Application) -> None:
    rooms = hotel.dispatch(ListRooms())
    if not rooms:
        typer.echo("No rooms yet.")
        return
    typer.echo("Rooms:")
    typer.echo(f"{'Room':<12}{'Base cost':<14}{'After discount':<16}")
    for room in rooms:
        typer.echo(f"{room.identifier:<12}{room.base_cost:<14.2f}{room.final_cost:<16.2f}")


def _show_average(hotel: Application) -> None:
    average = hotel.dispatch(GetAverageFinalCost())
    typer.echo(f"Average cost (after discounts): {average:.2f}")


def run_menu(hotel: Application, read: Reader = read_line) -> None:
    """Menu loop. Returns when the user picks 0."""
    while True:
        typer.echo(MENU)
        choice = prompt_menu_choice("Your choice: ", EXIT, AVERAGE, read)
        try:
            if choice == EXIT:
                typer.echo("Goodbye.")
                return
            elif choice == ADD:
                _add_room(hotel, read)
            elif choice == SHOW:
                _show_rooms(hotel)
            elif choice == AVERAGE:
                _show_average(hotel)
        except typer.Abort:
            raise
        except HotelError as exc:
            typer.echo(f"Error: {exc}")
        except Exception as exc:
            logger.exception("Unexpected failure handling menu choice %d", choice)
            typer.echo(f"Unexpected error: {exc}")


@app.command()
def menu(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", "-l", help="Logging level (DEBUG, INFO, WARNING, ...). Default from HOTEL_LOG_LEVEL or WARNING."
    ),
) -> None:
    """Start the interactive hotel rooms menu."""
    try:
        config = load_config_from_env(log_level=log_level)
        configure_logging(config.log_level)
    except ValueError as exc:
        typer.echo(f"Configuration error: {exc}", err=True)
        raise typer.Exit(2)
    run_menu(build_application(config))


def main() -> None:
    """Entry point for the hotel-rooms console command."""
    app()


if __name__ == "__main__":
    main()
