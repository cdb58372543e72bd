"""Screen-level tests for NavStackApp using Textual's pilot."""

import pytest
from textual.color import Color
from textual.command import CommandPalette
from textual.screen import ModalScreen

from navstack.app import NavStackApp
from navstack.destinations import DestinationColor
from navstack.screens.destination_screen import DestinationScreen
from navstack.screens.root_screen import RootScreen
from navstack.sample_data import INTRO_LINK, MANUFACTURERS, VEHICLES
from navstack.widgets.breadcrumb_bar import BreadcrumbBar
from navstack.widgets.record_list import RecordItem, RecordList


class TestRootScreen:

    @pytest.mark.asyncio
    async def test_starts_at_root(self):
        async with NavStackApp().run_test() as pilot:
            app = pilot.app
            assert isinstance(app.screen, RootScreen)
            assert app.navigation.depth == 0
            assert app.navigation.current_destination is None

    @pytest.mark.asyncio
    async def test_lists_every_record(self):
        async with NavStackApp().run_test() as pilot:
            record_list = pilot.app.screen.query_one("#record-list", RecordList)
            records = [item.record for item in record_list.query(RecordItem)]
            assert records == [INTRO_LINK, *MANUFACTURERS, *VEHICLES]

    @pytest.mark.asyncio
    async def test_back_at_root_is_noop(self):
        async with NavStackApp().run_test() as pilot:
            await pilot.press("escape")
            await pilot.pause()
            assert isinstance(pilot.app.screen, RootScreen)
            assert pilot.app.navigation.depth == 0


class TestSelection:

    @pytest.mark.asyncio
    async def test_select_gm_then_back(self):
        async with NavStackApp().run_test() as pilot:
            app = pilot.app
            await pilot.click("#manufacturer-1")
            await pilot.pause()

            assert app.navigation.depth == 1
            assert isinstance(app.screen, DestinationScreen)
            assert app.screen.destination.color is DestinationColor.INDIGO
            body = app.screen.query_one("#destination-body")
            assert body.styles.background == Color.parse("indigo")
            assert app.navigation.current_record == MANUFACTURERS[1]

            await pilot.press("escape")
            await pilot.pause()

            assert app.navigation.depth == 0
            assert isinstance(app.screen, RootScreen)

    @pytest.mark.asyncio
    async def test_select_seabreeze(self):
        async with NavStackApp().run_test() as pilot:
            app = pilot.app
            await pilot.click("#vehicle-2")
            await pilot.pause()

            assert app.navigation.depth == 1
            screen = app.screen
            assert isinstance(screen, DestinationScreen)
            assert screen.destination.color is DestinationColor.RED
            assert screen.destination.text == "2002 Chrysler SeaBreeze"
            assert screen.query_one("#destination-text") is not None
            assert screen.query_one("#destination-body").styles.background == Color.parse("red")

    @pytest.mark.asyncio
    async def test_intro_link(self):
        async with NavStackApp().run_test() as pilot:
            app = pilot.app
            await pilot.click("#intro-link")
            await pilot.pause()

            assert app.navigation.current_record == INTRO_LINK
            assert app.screen.destination.color is None
            assert app.screen.destination.text == "I'm the view you navigate to."

    @pytest.mark.asyncio
    async def test_back_button(self):
        async with NavStackApp().run_test() as pilot:
            app = pilot.app
            await pilot.click("#manufacturer-0")
            await pilot.pause()
            assert app.navigation.depth == 1

            await pilot.click("#nav-back")
            await pilot.pause()
            assert app.navigation.depth == 0
            assert isinstance(app.screen, RootScreen)


class TestNavigationManager:

    @pytest.mark.asyncio
    async def test_push_pop_restores_screen(self):
        async with NavStackApp().run_test() as pilot:
            app = pilot.app
            nav = app.navigation

            nav.push(MANUFACTURERS[0])
            await pilot.pause()
            first_screen = app.screen

            nav.push(VEHICLES[0])
            await pilot.pause()
            assert nav.depth == 2
            assert app.screen is not first_screen

            assert nav.pop() == VEHICLES[0]
            await pilot.pause()
            assert nav.depth == 1
            assert app.screen is first_screen
            assert app.screen.destination.color is DestinationColor.BLUE

    @pytest.mark.asyncio
    async def test_pop_to_root_from_any_depth(self):
        async with NavStackApp().run_test() as pilot:
            app = pilot.app
            nav = app.navigation
            for record in (*MANUFACTURERS, *VEHICLES):
                nav.push(record)
            await pilot.pause()
            assert nav.depth == 7
            assert len(app.screen_stack) == 9

            removed = nav.pop_to_root()
            await pilot.pause()
            assert len(removed) == 7
            assert nav.depth == 0
            assert isinstance(app.screen, RootScreen)
            assert len(app.screen_stack) == 2

    @pytest.mark.asyncio
    async def test_pop_to_intermediate_depth(self):
        async with NavStackApp().run_test() as pilot:
            app = pilot.app
            nav = app.navigation
            for record in VEHICLES:
                nav.push(record)
            await pilot.pause()

            nav.pop_to(1)
            await pilot.pause()
            assert nav.depth == 1
            assert app.screen.destination.text == VEHICLES[0].label
            assert nav.pop_to(5) == []

    @pytest.mark.asyncio
    async def test_pop_to_negative_raises(self):
        async with NavStackApp().run_test() as pilot:
            with pytest.raises(ValueError):
                pilot.app.navigation.pop_to(-1)

    @pytest.mark.asyncio
    async def test_pop_at_root_returns_none(self):
        async with NavStackApp().run_test() as pilot:
            assert pilot.app.navigation.pop() is None
            assert not pilot.app.navigation.can_go_back()

    @pytest.mark.asyncio
    async def test_home_key_pops_to_root(self):
        async with NavStackApp().run_test() as pilot:
            app = pilot.app
            app.navigation.push(MANUFACTURERS[2])
            app.navigation.push(VEHICLES[1])
            await pilot.pause()

            await pilot.press("home")
            await pilot.pause()
            assert app.navigation.depth == 0
            assert isinstance(app.screen, RootScreen)


class TestBreadcrumbs:

    @pytest.mark.asyncio
    async def test_title_tracks_path(self):
        async with NavStackApp(title="Cars").run_test() as pilot:
            app = pilot.app
            app.navigation.push(MANUFACTURERS[1])
            app.navigation.push(VEHICLES[1])
            await pilot.pause()

            assert app.navigation.breadcrumbs() == ["GM", "1996 GM Trailblazer"]
            assert app.title == "Cars - GM › 1996 GM Trailblazer"

            app.navigation.pop_to_root()
            await pilot.pause()
            assert app.title == "Cars"

    @pytest.mark.asyncio
    async def test_breadcrumbs_can_be_hidden(self):
        async with NavStackApp(title="Cars", show_breadcrumbs=False).run_test() as pilot:
            pilot.app.navigation.push(MANUFACTURERS[0])
            await pilot.pause()
            assert pilot.app.title == "Cars"

    @pytest.mark.asyncio
    async def test_bar_shows_trail(self):
        async with NavStackApp().run_test() as pilot:
            pilot.app.navigation.push(MANUFACTURERS[3])
            await pilot.pause()
            bar = pilot.app.screen.query_one(BreadcrumbBar)
            assert bar.trail == "Home › Chrysler"
            assert pilot.app.screen.depth == 1


class TestBackNavigationControls:

    @pytest.mark.asyncio
    async def test_home_button_pops_to_root(self):
        async with NavStackApp().run_test() as pilot:
            app = pilot.app
            app.navigation.push(MANUFACTURERS[0])
            app.navigation.push(VEHICLES[0])
            await pilot.pause()

            await pilot.click("#nav-root")
            await pilot.pause()
            assert app.navigation.depth == 0
            assert isinstance(app.screen, RootScreen)

    @pytest.mark.asyncio
    async def test_backspace_goes_back(self):
        async with NavStackApp().run_test() as pilot:
            app = pilot.app
            await pilot.click("#vehicle-0")
            await pilot.pause()
            assert app.navigation.depth == 1

            await pilot.press("backspace")
            await pilot.pause()
            assert app.navigation.depth == 0
            assert isinstance(app.screen, RootScreen)


class TestCoveringScreens:

    @pytest.mark.asyncio
    async def test_escape_closes_command_palette_first(self):
        async with NavStackApp().run_test() as pilot:
            app = pilot.app
            await pilot.click("#manufacturer-1")
            await pilot.pause()
            destination_screen = app.screen

            await pilot.press("ctrl+p")
            await pilot.pause()
            assert isinstance(app.screen, CommandPalette)

            for _ in range(3):
                if not isinstance(app.screen, CommandPalette):
                    break
                await pilot.press("escape")
                await pilot.pause()

            assert app.screen is destination_screen
            assert app.navigation.depth == 1
            assert len(app.screen_stack) == app.navigation.depth + 2

            await pilot.press("escape")
            await pilot.pause()
            assert app.navigation.depth == 0
            assert isinstance(app.screen, RootScreen)

    @pytest.mark.asyncio
    async def test_manager_leaves_foreign_screen_alone(self):
        async with NavStackApp().run_test() as pilot:
            app = pilot.app
            nav = app.navigation
            nav.push(MANUFACTURERS[1])
            await pilot.pause()
            destination_screen = app.screen

            modal = ModalScreen()
            app.push_screen(modal)
            await pilot.pause()

            assert not nav.owns_active_screen()
            assert nav.pop() is None
            assert nav.pop_to_root() == []
            assert nav.depth == 1
            assert app.screen is modal

            app.pop_screen()
            await pilot.pause()
            assert app.screen is destination_screen
            assert nav.owns_active_screen()
            assert nav.pop() == MANUFACTURERS[1]
