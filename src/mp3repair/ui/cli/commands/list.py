"""List command implementation for the CLI."""

from __future__ import annotations

import logging
from typing import final

from mp3repair.application.services import ListService
from mp3repair.shared import ExitStatus, get_bool
from mp3repair.ui.cli.commands.executor import CommandExecutor
from mp3repair.ui.cli.display.listing import ListingDisplay, ListingOptions

ALBUMS_FLAG = "--albums"
ARTISTS_FLAG = "--artists"
TRACKS_FLAG = "--tracks"
BY_NUMBER_FLAG = "--byNumber"
BY_TITLE_FLAG = "--byTitle"


@final
class ListCommand(CommandExecutor):
    """Print the filtered library as artists, albums and tracks."""

    def execute(self) -> ExitStatus:
        values = self.args.values
        options = ListingOptions()
        options.albums, albums_user_set = get_bool(values, "albums")
        options.artists, artists_user_set = get_bool(values, "artists")
        options.tracks, tracks_user_set = get_bool(values, "tracks")
        options.annotate, _ = get_bool(values, "annotate")
        options.details, _ = get_bool(values, "details")
        options.diagnostic, _ = get_bool(values, "diagnostic")
        options.by_number, by_number_user_set = get_bool(values, "byNumber")
        options.by_title, by_title_user_set = get_bool(values, "byTitle")

        if not self.has_work_to_do(options, albums_user_set, artists_user_set, tracks_user_set):
            return ExitStatus.USER_ERROR
        if not self.tracks_sortable(options, albums_user_set, by_number_user_set, by_title_user_set):
            return ExitStatus.USER_ERROR
        settings = self.search_settings()
        if settings is None:
            return ExitStatus.USER_ERROR
        limit = self.open_file_limit()

        service = ListService(self.library)
        with_metadata = options.details or options.diagnostic
        artists = self.progress_display.run(
            lambda cb: service.load(
                settings,
                with_metadata=with_metadata,
                open_file_limit=limit,
                progress_callback=cb,
            )
        )
        if artists is None:
            return ExitStatus.USER_ERROR
        ListingDisplay(self.bus, options, service.v1_diagnostics).show(artists)
        return ExitStatus.SUCCESS

    def has_work_to_do(
        self,
        options: ListingOptions,
        albums_user_set: bool,
        artists_user_set: bool,
        tracks_user_set: bool,
    ) -> bool:
        if options.albums or options.artists or options.tracks:
            return True
        flags = ((ALBUMS_FLAG, albums_user_set), (ARTISTS_FLAG, artists_user_set), (TRACKS_FLAG, tracks_user_set))
        user_set = [flag for flag, was_set in flags if was_set]
        configured = [flag for flag, was_set in flags if not was_set]
        self.bus.error_print("No listing will be output.")
        self.bus.error_print("Why?")
        if not user_set:
            self.bus.error_printf(
                "The flags %s, %s, and %s are all configured false.", ALBUMS_FLAG, ARTISTS_FLAG, TRACKS_FLAG
            )
        elif not configured:
            self.bus.error_printf(
                "You explicitly set %s, %s, and %s false.", ALBUMS_FLAG, ARTISTS_FLAG, TRACKS_FLAG
            )
        else:
            self.bus.error_printf(
                "In addition to %s configured false, you explicitly set %s false.",
                " and ".join(configured),
                " and ".join(user_set),
            )
        self.bus.error_print("What to do:")
        self.bus.error_print("Either:")
        self.bus.begin_error_list(True)
        self.bus.error_print("Edit the configuration file so that at least one of these flags is true, or")
        self.bus.error_print("Explicitly set at least one of these flags true on the command line.")
        self.bus.end_error_list()
        return False

    def tracks_sortable(
        self,
        options: ListingOptions,
        albums_user_set: bool,
        by_number_user_set: bool,
        by_title_user_set: bool,
    ) -> bool:
        """Check the sorting flags against ``--tracks`` and ``--albums``.

        When tracks are listed and neither sorting flag is on, one is chosen:
        the opposite of a flag the user turned off, else by number when albums
        are listed and by title otherwise.
        """
        if not options.tracks:
            if (options.by_number and by_number_user_set) or (options.by_title and by_title_user_set):
                self.bus.error_print("Your sorting preferences are not relevant.")
                self.bus.error_print("Why?")
                self.bus.error_printf(
                    "Tracks are not included in the output, but you explicitly set %s or %s true.",
                    BY_NUMBER_FLAG,
                    BY_TITLE_FLAG,
                )
                self.bus.error_printf(
                    "What to do:\nEither set %s true or remove the sorting flags from the command line.",
                    TRACKS_FLAG,
                )
                return False
            return True
        if options.by_number and options.by_title:
            self.bus.error_print("Track sorting cannot be done.")
            self.bus.error_print("Why?")
            if by_number_user_set and by_title_user_set:
                self.bus.error_printf("You explicitly set %s and %s true.", BY_NUMBER_FLAG, BY_TITLE_FLAG)
            elif by_number_user_set:
                self.bus.error_printf(
                    "The %s flag is configured true and you explicitly set %s true.",
                    BY_TITLE_FLAG,
                    BY_NUMBER_FLAG,
                )
            elif by_title_user_set:
                self.bus.error_printf(
                    "The %s flag is configured true and you explicitly set %s true.",
                    BY_NUMBER_FLAG,
                    BY_TITLE_FLAG,
                )
            else:
                self.bus.error_printf(
                    "The %s and %s flags are both configured true.", BY_NUMBER_FLAG, BY_TITLE_FLAG
                )
            self.bus.error_print(
                "What to do:\nEither edit the configuration file and use those default values, or use"
                " appropriate command line values."
            )
            return False
        if options.by_number and not options.albums:
            self.bus.error_print("Sorting tracks by number not possible.")
            self.bus.error_print("Why?")
            self.bus.error_print("Track numbers are only relevant if albums are also output.")
            if by_number_user_set and albums_user_set:
                self.bus.error_printf("You set %s true and %s false.", BY_NUMBER_FLAG, ALBUMS_FLAG)
            elif by_number_user_set:
                self.bus.error_printf(
                    "You set %s true and %s is configured as false.", BY_NUMBER_FLAG, ALBUMS_FLAG
                )
            elif albums_user_set:
                self.bus.error_printf(
                    "You set %s false and %s is configured as true.", ALBUMS_FLAG, BY_NUMBER_FLAG
                )
            else:
                self.bus.error_printf(
                    "%s is configured as false, and %s is configured as true.", ALBUMS_FLAG, BY_NUMBER_FLAG
                )
            self.bus.error_print(
                "What to do:\nEither edit the configuration file or change which flags you set on the"
                " command line."
            )
            return False
        if not options.by_number and not options.by_title:
            if by_number_user_set and by_title_user_set:
                self.bus.error_print("A listing of tracks is not possible.")
                self.bus.error_print("Why?")
                self.bus.error_printf(
                    "Tracks are enabled, but you set both %s and %s false.", BY_NUMBER_FLAG, BY_TITLE_FLAG
                )
                self.bus.error_print("What to do:\nEnable one of the sorting flags.")
                return False
            if by_number_user_set:
                options.by_title = True
            elif by_title_user_set:
                options.by_number = True
            elif options.albums:
                options.by_number = True
            else:
                options.by_title = True
            self.bus.log(
                logging.INFO,
                "no track sorting set, providing a sensible value",
                {ALBUMS_FLAG: options.albums, BY_NUMBER_FLAG: options.by_number, BY_TITLE_FLAG: options.by_title},
            )
        return True


__all__ = ["ListCommand"]
