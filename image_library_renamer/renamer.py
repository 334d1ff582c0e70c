"""Folder renaming implementation."""

import errno
import logging
from concurrent.futures import Future, ThreadPoolExecutor
from datetime import datetime
from pathlib import Path
from queue import Empty, Queue
from threading import Thread
from typing import Any, Callable, Dict, Optional, Sequence

from dateutil import parser as date_parser

from image_library_renamer.exif import ExifReader, FormatError

logger = logging.getLogger(__name__)

FOLDER_PLACEHOLDER = "[folder]"

# EXIF was introduced in 1995, older dates come from unset camera clocks
EXIF_MIN_YEAR = 1995

_NO_YEAR_DEFAULTS = (datetime(1, 1, 1), datetime(2, 1, 1))


def parse_folder_date(name: str) -> Optional[datetime]:
    """
    Return date the folder name starts with.

    Only the first word is considered. Plain numbers (years, counters) and
    words without digits ("May", "Sun") are not treated as dates, and the
    date must include a year.
    """
    first_word = name.split(" ")[0]

    if first_word.isdigit() or not any(c.isdigit() for c in first_word):
        return None

    try:
        date = date_parser.parse(first_word, default=_NO_YEAR_DEFAULTS[0])
        # Words without a year ("1st", "12-24") come back with the default one
        if date.year != date_parser.parse(first_word, default=_NO_YEAR_DEFAULTS[1]).year:
            return None
    except (ValueError, OverflowError):
        return None

    return date


class ImageOpenError(Exception):
    """Raised if image couldn't be opened."""

    def __init__(self, path: Path):
        """Create new open exception with given path to file."""
        super().__init__(f"Couldn't open image ({path})")

        self.path = path


class FolderRenameError(Exception):
    """Raised if folder couldn't be renamed."""

    def __init__(self, path: Path, new_path: Path, reason: Exception):
        """Create new rename exception with both paths and the reason."""
        super().__init__(f"Couldn't rename folder ({path})")

        self.path = path
        self.new_path = new_path
        self.reason: Exception = reason


class ImageFile:
    """Class for reading dates of an image file."""

    def __init__(self, path: Path):
        """Create new read-only image file object."""
        self.__path = Path(path)

    def get_date_time(self) -> Optional[datetime]:
        """Extract date of taking the picture from EXIF."""
        try:
            with ExifReader(self.__path) as reader:
                return reader.get_taken_time()
        except (OSError, FormatError) as e:
            raise ImageOpenError(self.__path) from e

    def get_file_date(self) -> datetime:
        """Return the oldest of file's timestamps."""
        try:
            stat = self.__path.stat()
        except OSError as e:
            raise ImageOpenError(self.__path) from e

        return datetime.fromtimestamp(min(stat.st_ctime, stat.st_mtime, stat.st_atime))


class FolderRenamer:
    """Renames folders so their names start with the date of their pictures."""

    input_dir: Path
    search_pattern: str = "*"
    date_format: str = "%Y-%m-%d " + FOLDER_PLACEHOLDER
    use_exif: bool = True
    use_file_date: bool = True
    recursive: bool = True
    test_mode: bool = False
    skip_top_level: bool = True
    skip_numeric: bool = False
    skip_folders: Sequence[str]
    skip_if_xmp: bool = False
    skip_if_name_has_date: bool = False

    on_finish: Callable
    on_queue: Callable[[Path, Path, float], Any]
    on_rename: Callable[[Path, Path, float], Any]
    on_skip: Callable[[Path, str, float], Any]
    on_error: Callable[[Exception, float], Any]

    __output_queue: Queue
    __dirs: list
    __rename_queue: Dict[Path, Path]
    __cancelled: bool = False

    def __init__(self, input_dir: Path):
        """Create new renamer."""
        self.input_dir = input_dir
        self.skip_folders = []
        self.__rename_queue = {}

    @property
    def rename_queue(self) -> Dict[Path, Path]:
        """Return folders planned for renaming by the last run."""
        return dict(self.__rename_queue)

    def run(self):
        """Start renaming task."""
        self.__output_queue = Queue()
        self.__dirs = []
        self.__rename_queue = {}

        logger.info("Checking %s", self.input_dir)

        prepare_thread = Thread(target=self.__prepare, args=(self.input_dir, True))
        prepare_thread.start()
        prepare_thread.join()

        with ThreadPoolExecutor() as executor:
            futures = []
            for dir_data in self.__dirs:
                future = executor.submit(self.__dating_task, dir_data)
                future.add_done_callback(lambda _: self.__output_queue.put(("done",)))
                futures.append(future)

            self.__run_event_loop(futures)

        if not self.test_mode and not self.__cancelled:
            self.__rename_folders()

        self.__notify("on_finish")

    def cancel(self) -> None:
        """Request cancellation of renaming task."""
        self.__cancelled = True

    def __notify(self, callback: str, *args) -> None:
        if getattr(self, callback, False):
            getattr(self, callback)(*args)

    def __run_event_loop(self, futures: Sequence[Future]):
        while False in [f.done() for f in futures] or not self.__output_queue.empty():
            try:
                event = self.__output_queue.get(timeout=60)
            except Empty:
                self.__notify(
                    "on_error",
                    RuntimeError(
                        "empty-queue",
                        "No event received in last 60 seconds.",
                    ),
                    self.__get_progress(),
                )
                continue

            if event[0] == "queue":
                self.__rename_queue[event[1]] = event[2]
                self.__notify("on_queue", *event[1:])
            elif event[0] == "skip":
                self.__notify("on_skip", *event[1:])
            elif event[0] == "error":
                self.__notify("on_error", *event[1:])

    def __prepare(self, dir: Path, top_level: bool) -> None:
        """Prepare list of directories to date."""
        if self.__cancelled:
            return

        if dir.name.startswith("."):
            self.__trigger_event(("skip", dir, "Hidden folder"))
            return

        if dir.name in self.skip_folders:
            self.__trigger_event(("skip", dir, "Excluded folder"))
            return

        try:
            subdirs = []
            has_xmp = False
            for file in dir.iterdir():
                if file.is_dir():
                    subdirs.append(file)
                elif file.suffix.lower() == ".xmp":
                    has_xmp = True
        except OSError as e:
            self.__trigger_event(("error", e))
            return

        if top_level and self.skip_top_level:
            self.__trigger_event(("skip", dir, "Top level folder"))
        elif self.skip_numeric and dir.name.isdigit():
            self.__trigger_event(("skip", dir, "Numeric folder"))
        elif self.skip_if_xmp and has_xmp:
            self.__trigger_event(("skip", dir, "Folder has XMP sidecar files"))
        else:
            self.__dirs.append({"dir": dir, "done": False})

        if self.recursive:
            for subdir in sorted(subdirs):
                self.__prepare(subdir, False)

    def __dating_task(self, dir_data: dict):
        """Find date of a folder and plan its new name."""
        dir = dir_data["dir"]

        try:
            if self.__cancelled:
                dir_data["done"] = True
                return

            self.__date_folder(dir)
        except OSError as e:
            self.__trigger_event(("error", e), dir)
        except Exception as e:
            logger.exception("Unexpected error while dating %s", dir)
            self.__trigger_event(("error", e), dir)

    def __date_folder(self, dir: Path):
        """Determine new folder name and queue it for renaming."""
        files = sorted(f for f in dir.glob(self.search_pattern) if f.is_file())
        folder_date = self.__find_folder_date(files)

        if folder_date is None:
            self.__trigger_event(("skip", dir, "No dates found"), dir)
            return

        pattern = self.date_format.replace(FOLDER_PLACEHOLDER, "[]")
        date_string = folder_date.strftime(pattern)

        name = dir.name
        first_word = name.split(" ")[0]
        if name in date_string or (first_word and first_word in date_string):
            self.__trigger_event(
                ("skip", dir, "Folder name already contains the same date"), dir
            )
            return

        existing_date = parse_folder_date(name)
        if existing_date is not None:
            if self.skip_if_name_has_date:
                self.__trigger_event(
                    ("skip", dir, f"Folder name already contains a date ({existing_date:%Y-%m-%d})"),
                    dir,
                )
                return

            if (existing_date.year, existing_date.month) == (folder_date.year, folder_date.month):
                self.__trigger_event(
                    ("skip", dir, "Folder name already contains the same month"), dir
                )
                return

        new_path = dir.with_name(date_string.replace("[]", name))

        logger.info("Queued %s -> %s", dir, new_path)
        self.__trigger_event(("queue", dir, new_path), dir)

    def __find_folder_date(self, files: Sequence[Path]) -> Optional[datetime]:
        """Return EXIF date of the first dated picture or the oldest file date."""
        file_date = None

        for file in files:
            if self.__cancelled:
                break

            img = ImageFile(file)

            if self.use_exif:
                try:
                    exif_date = img.get_date_time()
                except ImageOpenError as e:
                    logger.debug("%s: %s", e, e.__cause__)
                    exif_date = None

                if exif_date is not None and exif_date.year >= EXIF_MIN_YEAR:
                    logger.info("Found EXIF date %s in %s", exif_date, file)
                    return exif_date

            if not self.use_file_date:
                continue

            try:
                date = img.get_file_date()
            except ImageOpenError as e:
                logger.debug("%s: %s", e, e.__cause__)
                continue

            if file_date is None or date < file_date:
                file_date = date

        return file_date

    def __rename_folders(self) -> None:
        """Rename queued folders, the deepest ones first."""
        queue = sorted(
            self.__rename_queue.items(), key=lambda item: len(item[0].parts), reverse=True
        )

        for i, (path, new_path) in enumerate(queue, start=1):
            if self.__cancelled:
                break

            try:
                if new_path.exists():
                    raise FileExistsError(
                        errno.EEXIST, "Folder already exists", str(new_path)
                    )
                path.rename(new_path)
            except OSError as e:
                logger.error("Couldn't rename %s to %s: %s", path, new_path, e)
                self.__notify("on_error", FolderRenameError(path, new_path, e), i / len(queue))
                continue

            logger.info("Renamed %s -> %s", path, new_path)
            self.__notify("on_rename", path, new_path, i / len(queue))

    def __trigger_event(
        self, event_data: tuple, input_dir: Optional[Path] = None
    ) -> None:
        """
        Triggers a renamer progress event.

        event_data is a tuple in a form of ("event_name", *event_args)
        where event_name is required.
        If input_dir is provided, the directory is marked as dated.
        """
        if input_dir:
            dir_data = self.__get_dir_data(input_dir)
            if dir_data:
                dir_data["done"] = True
        self.__output_queue.put((*event_data, self.__get_progress()))

    def __get_dir_data(self, dir: Path) -> Optional[dict]:
        """Return renamer data about specified directory."""
        for dir_data in self.__dirs:
            if dir_data["dir"] == dir:
                return dir_data
        return None

    def __get_progress(self) -> float:
        """Return total progress on dating as number in range of [0;1]."""
        if len(self.__dirs) == 0:
            return 1

        done = len([d for d in self.__dirs if d["done"]])
        return done / len(self.__dirs)
