"""Tests for the interactive menu, driven with scripted input."""
import pytest
import typer

from hotel_rooms.cli.main import app, run_menu
from hotel_rooms.rooms import ListRooms

from tests.helpers import scripted


def feed(*lines):
    return "\n".join(lines) + "\n"


class TestMenuCommand:
    def test_exit_immediately(self, cli_runner):
        result = cli_runner.invoke(app, [], input=feed("0"))
        assert result.exit_code == 0
        assert "HOTEL ROOMS MENU" in result.output
        assert "Goodbye." in result.output

    def test_two_rooms_and_average(self, cli_runner):
        result = cli_runner.invoke(
            app,
            [],
            input=feed("1", "101", "1000", "10", "1", "102", "500", "0", "2", "3", "0"),
        )
        assert result.exit_code == 0
        assert result.output.count("Room added.") == 2
        assert "101         1000.00       900.00" in result.output
        assert "102         500.00        500.00" in result.output
        assert "Average cost (after discounts): 700.00" in result.output

    def test_duplicate_room_is_reported_and_menu_continues(self, cli_runner):
        result = cli_runner.invoke(
            app,
            [],
            input=feed("1", "A", "100", "0", "1", "A", "200", "0", "2", "0"),
        )
        assert result.exit_code == 0
        assert "Error: Duplicate room: room 'A' already exists" in result.output
        assert result.output.count("Room added.") == 1
        assert "A           100.00        100.00" in result.output
        assert "200.00" not in result.output

    def test_average_with_no_rooms(self, cli_runner):
        result = cli_runner.invoke(app, [], input=feed("3", "0"))
        assert result.exit_code == 0
        assert "Error: Room list is empty: nothing to average" in result.output

    def test_listing_with_no_rooms(self, cli_runner):
        result = cli_runner.invoke(app, [], input=feed("2", "0"))
        assert "No rooms yet." in result.output
        assert "Rooms:" not in result.output

    def test_bad_menu_input_is_asked_again(self, cli_runner):
        result = cli_runner.invoke(app, [], input=feed("9", "abc", "", "0"))
        assert result.exit_code == 0
        assert "Number must be in range [0, 3]." in result.output
        assert "Enter a whole number." in result.output
        assert "Goodbye." in result.output

    def test_bad_room_fields_are_asked_again(self, cli_runner):
        result = cli_runner.invoke(
            app,
            [],
            input=feed("1", "   ", "R1", "-5", "abc", "2000000", "100", "-1", "100", "25", "2", "0"),
        )
        assert result.exit_code == 0
        out = result.output
        assert "String must not be empty." in out
        assert "Value must be greater than 0." in out
        assert "Enter a number." in out
        assert "Value must not exceed 1000000." in out
        assert "Value must not be negative." in out
        assert "Discount percent must be less than 100." in out
        assert "R1          100.00        75.00" in out

    def test_identifier_is_trimmed(self, cli_runner):
        result = cli_runner.invoke(app, [], input=feed("1", "  B-7  ", "80", "0", "1", "B-7", "90", "0", "0"))
        assert "Duplicate room: room 'B-7'" in result.output

    def test_end_of_input_aborts(self, cli_runner):
        result = cli_runner.invoke(app, [], input="")
        assert result.exit_code == 1

    def test_end_of_input_while_adding_a_room_aborts(self, cli_runner, caplog):
        result = cli_runner.invoke(app, [], input=feed("1", "101"))
        assert result.exit_code == 1
        assert "Unexpected error" not in result.output
        assert "Unexpected failure" not in caplog.text
        assert result.output.count("HOTEL ROOMS MENU") == 1

    def test_max_base_cost_from_environment(self, cli_runner, monkeypatch):
        monkeypatch.setenv("HOTEL_MAX_BASE_COST", "500")
        result = cli_runner.invoke(app, [], input=feed("1", "S", "600", "400", "0", "0"))
        assert result.exit_code == 0
        assert "Value must not exceed 500." in result.output
        assert "Room added." in result.output

    def test_bad_configuration_exits_with_code_2(self, cli_runner, monkeypatch):
        monkeypatch.setenv("HOTEL_LONG_IDENTIFIER_LENGTH", "many")
        result = cli_runner.invoke(app, [], input=feed("0"))
        assert result.exit_code == 2
        assert "Configuration error" in result.output

    def test_unknown_log_level_option(self, cli_runner):
        result = cli_runner.invoke(app, ["--log-level", "LOUD"], input=feed("0"))
        assert result.exit_code == 2


class TestRunMenu:
    def test_unexpected_errors_are_reported_and_loop_continues(self, hotel, capsys, monkeypatch):
        def boom(message):
            raise RuntimeError("boom")

        monkeypatch.setattr(hotel, "dispatch", boom)
        run_menu(hotel, scripted("2", "3", "0"))
        out = capsys.readouterr().out
        assert out.count("Unexpected error: boom") == 2
        assert "Goodbye." in out

    def test_rooms_added_through_menu_reach_the_application(self, hotel, capsys):
        run_menu(hotel, scripted("1", "101", "1000", "10", "0"))
        [row] = hotel.dispatch(ListRooms())
        assert row.identifier == "101"
        assert row.final_cost == pytest.approx(900.0)

    def test_long_identifier_is_accepted(self, hotel, capsys):
        run_menu(hotel, scripted("1", "X" * 60, "100", "0", "0"))
        assert "Room added." in capsys.readouterr().out
        assert len(hotel.dispatch(ListRooms())) == 1

    def test_abort_while_adding_a_room_ends_the_session(self, hotel, capsys):
        def read(text):
            if text.startswith("Your choice"):
                return "1"
            raise typer.Abort()

        with pytest.raises(typer.Abort):
            run_menu(hotel, read)
        assert "Unexpected error" not in capsys.readouterr().out
        assert hotel.dispatch(ListRooms()) == []
