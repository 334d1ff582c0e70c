"""
Rewriting of file timestamps.

Pictures copied between disks often lose their original file dates. The
fixer restores them from the date Picasa stored in `.picasa.ini` or from the
date a folder name starts with. Only the access and modification times can be
set portably, so the modification time is what the fixer compares and writes.
"""

import logging
import os
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, Callable, List, Optional

from image_library_renamer.renamer import parse_folder_date

logger = logging.getLogger(__name__)

PICASA_INI = ".picasa.ini"

# Picasa stores OLE automation dates, day 2 is 1900-01-01
PICASA_EPOCH = datetime(1900, 1, 1)

# Picasa folder dates newer than this are trusted less than the folder's own
PICASA_MAX_FOLDER_YEAR = 2010


def picasa_date_to_datetime(value: str) -> datetime:
    """Convert Picasa date ("29586.603900") to datetime."""
    return PICASA_EPOCH + timedelta(days=float(value) - 2)


def read_picasa_date(folder: Path) -> Optional[datetime]:
    """Return date from folder's .picasa.ini or None if there isn't one."""
    ini_path = folder / PICASA_INI
    if not ini_path.is_file():
        return None

    with ini_path.open(encoding="utf-8", errors="replace") as ini_file:
        for line in ini_file:
            line = line.strip()
            if line.startswith("date="):
                return picasa_date_to_datetime(line[len("date="):])

    return None


class TimestampFixer:
    """Sets timestamps of files to the date of their folder."""

    input_dir: Path
    min_days_diff: int = 365
    test_mode: bool = False

    on_finish: Callable
    on_update: Callable[[Path, datetime, datetime], Any]
    on_error: Callable[[Exception], Any]

    __cancelled: bool = False

    def __init__(self, input_dir: Path):
        """Create new fixer."""
        self.input_dir = input_dir

    def cancel(self) -> None:
        """Request cancellation of the running task."""
        self.__cancelled = True

    def embed_picasa_dates(self) -> None:
        """Apply .picasa.ini dates to all subfolders of input directory."""
        logger.info("Embedding Picasa dates in %s", self.input_dir)

        self.__embed_in_subfolders(self.input_dir)
        self.__notify("on_finish")

    def apply_folder_name_dates(self) -> None:
        """Apply dates from folder names to files in the whole tree."""
        logger.info("Applying folder name dates in %s", self.input_dir)

        self.__apply_in_tree(self.input_dir)
        self.__notify("on_finish")

    def __notify(self, callback: str, *args) -> None:
        if getattr(self, callback, False):
            getattr(self, callback)(*args)

    def __report_error(self, e: Exception) -> None:
        logger.error("%s", e)
        self.__notify("on_error", e)

    def __list_subfolders(self, folder: Path) -> Optional[List[Path]]:
        try:
            return sorted(d for d in folder.iterdir() if d.is_dir())
        except OSError as e:
            self.__report_error(e)
            return None

    def __embed_in_subfolders(self, folder: Path) -> None:
        directories = self.__list_subfolders(folder)
        if not directories:
            return

        logger.info("%d folders in %s", len(directories), folder)

        for directory in directories:
            if self.__cancelled:
                return

            try:
                date = read_picasa_date(directory)
                if date is None:
                    self.__apply_folder_name_date(directory)
                else:
                    self.__embed_picasa_date(directory, date)
            except (OSError, ValueError) as e:
                self.__report_error(e)

            self.__embed_in_subfolders(directory)

    def __embed_picasa_date(self, directory: Path, date: datetime) -> None:
        logger.info("Found Picasa date %s for %s", date, directory)

        original_date = self.__get_time(directory)
        if (
            date.year < PICASA_MAX_FOLDER_YEAR
            and (original_date - date).days > self.min_days_diff
        ):
            self.__set_time(directory, original_date, date)

        self.__update_files(directory, date)

    def __apply_in_tree(self, folder: Path) -> None:
        try:
            self.__apply_folder_name_date(folder)
        except OSError as e:
            self.__report_error(e)

        for directory in self.__list_subfolders(folder) or []:
            if self.__cancelled:
                return

            self.__apply_in_tree(directory)

    def __apply_folder_name_date(self, directory: Path) -> None:
        date = parse_folder_date(directory.name)
        if date is None:
            return

        logger.info("Found date in folder name: %s for %s", date, directory)
        self.__update_files(directory, date)

    def __update_files(self, directory: Path, date: datetime) -> None:
        """Set date of files which are much newer than the folder."""
        for file in sorted(directory.iterdir()):
            if not file.is_file():
                continue

            original_date = self.__get_time(file)
            if (original_date - date).days > self.min_days_diff:
                self.__set_time(file, original_date, date)

    def __get_time(self, path: Path) -> datetime:
        return datetime.fromtimestamp(path.stat().st_mtime)

    def __set_time(self, path: Path, original_date: datetime, date: datetime) -> None:
        logger.info("Change %s to %s for %s", original_date, date, path)

        if not self.test_mode:
            timestamp = date.timestamp()
            os.utime(path, (timestamp, timestamp))

        self.__notify("on_update", path, original_date, date)
