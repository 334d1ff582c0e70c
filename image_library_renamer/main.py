"""GUI specific code."""

import locale
import logging
import math
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from PyQt5.QtCore import QThread, pyqtSignal
from PyQt5.QtWidgets import QApplication, QFileDialog, QMainWindow

from image_library_renamer.renamer import FolderRenameError, FolderRenamer
from image_library_renamer.timestamps import TimestampFixer
from image_library_renamer.ui.main_window import Ui_MainWindow

LOG_TAB = 1


class MainWindow(QMainWindow, Ui_MainWindow):
    """Application's main window."""

    def __init__(self, parent=None):
        """Create new main window."""
        super().__init__(parent)
        self.setupUi(self)

        self.__task_thread: Optional[QThread] = None
        self.__cancellable = False
        self.__log_status("Ready")

    def setupUi(self, MainWindow):  # pylint: disable=redefined-outer-name
        """Set up UI widgets and connect signals and slots."""
        super().setupUi(MainWindow)

        # Hide unusable widgets on init
        self.cancelButton.setVisible(False)

        # Open FileDialog and update path field
        self.inputDirectoryBrowseButton.clicked.connect(
            self.__on_input_directory_button_click
        )

        # Start/cancel tasks
        self.renameButton.clicked.connect(self.__on_rename_button_click)
        self.cancelButton.clicked.connect(self.__on_cancel_button_click)
        self.embedPicasaDatesButton.clicked.connect(
            self.__on_embed_picasa_dates_button_click
        )
        self.folderNameDatesButton.clicked.connect(
            self.__on_folder_name_dates_button_click
        )

        # Quit application
        self.actionQuit.triggered.connect(self.__quit)

    def __log_status(self, msg: str):
        """Display message in status listbox."""
        self.statusList.addItem(f"{datetime.now():%H:%M} {msg}")
        self.statusList.scrollToBottom()

    def __lock_ui(self, lock=True):

        widgets = [
            self.inputDirectoryPathEdit,
            self.inputDirectoryBrowseButton,
            self.datePatternComboBox,
            self.searchPatternEdit,
            self.skipFoldersEdit,
            self.useExifCheckBox,
            self.useFileDateCheckBox,
            self.recursiveCheckBox,
            self.testModeCheckBox,
            self.skipTopLevelCheckBox,
            self.skipNumericCheckBox,
            self.skipIfXmpCheckBox,
            self.skipIfNameHasDateCheckBox,
            self.minDaysDiffSpinBox,
            self.embedPicasaDatesButton,
            self.folderNameDatesButton,
        ]

        for widget in widgets:
            widget.setDisabled(lock)

        # Only renaming can be cancelled
        self.renameButton.setVisible(not lock)
        self.cancelButton.setVisible(lock and self.__cancellable)

    def __unlock_ui(self):
        self.__lock_ui(False)

    def __on_input_directory_button_click(self):
        """Call when input's "Browse" button has been clicked."""
        path_edit = self.inputDirectoryPathEdit
        path = QFileDialog.getExistingDirectory(self, directory=path_edit.text())

        if len(path) == 0:
            return

        path_edit.setText(path)

    def __get_input_path(self) -> Optional[Path]:
        """Return selected folder or log why there's none."""
        input_path = self.inputDirectoryPathEdit.text().strip()
        if len(input_path) == 0:
            self.__log_status("Invalid input directory")
            return None

        return Path(input_path)

    def __update_progress_bar(self, value: float):
        """
        Set progress bar to specified value.

        Value must be in range of [0;1].
        """
        self.statusProgress.setValue(math.floor(value * 100))

    def __start_task(self, thread: QThread, cancellable: bool = False):
        """Lock UI, show the log and run the task thread."""
        self.__task_thread = thread
        self.__cancellable = cancellable
        self.__lock_ui()
        self.tabWidget.setCurrentIndex(LOG_TAB)
        self.__update_progress_bar(0)

        self.__log_status("Starting...")
        self.__task_thread.start()

    def __on_rename_button_click(self):
        """Call when "Rename" button has been clicked."""
        input_path = self.__get_input_path()
        if input_path is None:
            return

        # Initialize renamer
        renamer = FolderRenamer(input_path)
        renamer.date_format = self.datePatternComboBox.currentText().strip()
        renamer.search_pattern = self.searchPatternEdit.text().strip() or "*"
        renamer.use_exif = self.useExifCheckBox.isChecked()
        renamer.use_file_date = self.useFileDateCheckBox.isChecked()
        renamer.recursive = self.recursiveCheckBox.isChecked()
        renamer.test_mode = self.testModeCheckBox.isChecked()
        renamer.skip_top_level = self.skipTopLevelCheckBox.isChecked()
        renamer.skip_numeric = self.skipNumericCheckBox.isChecked()
        renamer.skip_if_xmp = self.skipIfXmpCheckBox.isChecked()
        renamer.skip_if_name_has_date = self.skipIfNameHasDateCheckBox.isChecked()
        renamer.skip_folders = [
            name.strip() for name in self.skipFoldersEdit.text().split(",") if name.strip()
        ]

        thread = RenamerThread(renamer)

        thread.on_finish.connect(self.__on_task_finish)
        thread.on_queue.connect(self.__on_rename_queue)
        thread.on_rename.connect(self.__on_rename)
        thread.on_skip.connect(self.__on_rename_skip)
        thread.on_error.connect(self.__on_error)

        self.__start_task(thread, cancellable=True)

    def __start_timestamp_task(self, embed_picasa_dates: bool):
        input_path = self.__get_input_path()
        if input_path is None:
            return

        fixer = TimestampFixer(input_path)
        fixer.min_days_diff = self.minDaysDiffSpinBox.value()
        fixer.test_mode = self.testModeCheckBox.isChecked()

        thread = TimestampThread(fixer, embed_picasa_dates)

        thread.on_finish.connect(self.__on_task_finish)
        thread.on_update.connect(self.__on_timestamp_update)
        thread.on_error.connect(self.__on_timestamp_error)

        self.__start_task(thread)

    def __on_embed_picasa_dates_button_click(self):
        """Call when "Embed Picasa Dates" button has been clicked."""
        self.__start_timestamp_task(True)

    def __on_folder_name_dates_button_click(self):
        """Call when "Use Folder Name Dates" button has been clicked."""
        self.__start_timestamp_task(False)

    def __on_task_finish(self):
        """Call once a task finishes."""
        # Set progress to 100%
        self.__update_progress_bar(1)

        # Unlock UI
        self.cancelButton.setDisabled(False)
        self.__unlock_ui()

        # Log task cancellation
        if getattr(self.__task_thread, "stopped", False):
            self.__log_status("Renaming cancelled")

        # Ready
        self.__log_status("Ready")

    def __on_rename_queue(self, old_path: Path, new_path: Path, progress: float):
        """Call when folder has been queued for renaming."""
        self.__log_status(f'[RENAME] "{old_path.name}" >> "{new_path}"')
        self.__update_progress_bar(progress)

    def __on_rename(self, old_path: Path, new_path: Path, progress: float):
        """Call when folder has been renamed."""
        self.__log_status(f'Renamed "{old_path}" to "{new_path}"')
        self.__update_progress_bar(progress)

    def __on_rename_skip(self, path: Path, reason: str, progress: float):
        """Call when folder has been skipped."""
        self.__log_status(f'[SKIPPING] "{path}": {reason}')
        self.__update_progress_bar(progress)

    def __on_timestamp_update(self, path: Path, old_date: datetime, new_date: datetime):
        """Call when timestamp of a file has been changed."""
        self.__log_status(f'Changed "{path}" from {old_date:%Y-%m-%d} to {new_date:%Y-%m-%d}')

    def __on_timestamp_error(self, exception: Exception):
        self.__on_error(exception, self.statusProgress.value() / 100)

    def __on_error(self, exception: Exception, progress: float):
        msg = "Error: "

        if isinstance(exception, RuntimeError):
            if exception.args[0] == "empty-queue":
                msg = "Warning: Nothing was done in last 60 seconds."
            else:
                msg += str(exception)
        else:
            path = None
            if isinstance(exception, FolderRenameError):
                path = exception.path
                exception = exception.reason
            elif isinstance(exception, OSError):
                path = exception.filename

            if isinstance(exception, PermissionError):
                msg += f"Permission denied to {path}"
            elif isinstance(exception, FileNotFoundError):
                msg += f"{path} not found"
            elif isinstance(exception, FileExistsError):
                msg += f"{exception.filename} already exists"
            else:
                msg += str(exception)

        self.__log_status(msg)
        self.__update_progress_bar(progress)

    def __on_cancel_button_click(self):
        """Call when "Cancel" button has been clicked."""
        self.cancelButton.setDisabled(True)
        self.__task_thread.stop()

    def __quit(self):  # pragma: no cover
        """Close window and exit application."""
        self.close()


class RenamerThread(QThread):
    """Separate thread for renaming task."""

    on_queue = pyqtSignal(Path, Path, float)
    on_rename = pyqtSignal(Path, Path, float)
    on_error = pyqtSignal(Exception, float)
    on_skip = pyqtSignal(Path, str, float)
    on_finish = pyqtSignal()

    def __init__(self, renamer: FolderRenamer):
        """Create a new thread for renaming task."""
        super().__init__()
        self.__renamer = renamer

        self.stopped = False

        # Map renamer's callbacks to Qt signals
        self.__renamer.on_queue = self.on_queue.emit
        self.__renamer.on_rename = self.on_rename.emit
        self.__renamer.on_error = self.on_error.emit
        self.__renamer.on_skip = self.on_skip.emit
        self.__renamer.on_finish = self.on_finish.emit

    def run(self):
        """Run renamer task."""
        self.__renamer.run()

    def stop(self):
        """Request cancellation of renamer task."""
        self.stopped = True
        self.__renamer.cancel()


class TimestampThread(QThread):
    """Separate thread for timestamp fixing tasks."""

    on_update = pyqtSignal(Path, datetime, datetime)
    on_error = pyqtSignal(Exception)
    on_finish = pyqtSignal()

    def __init__(self, fixer: TimestampFixer, embed_picasa_dates: bool):
        """Create a new thread for timestamp task."""
        super().__init__()
        self.__fixer = fixer
        self.__embed_picasa_dates = embed_picasa_dates

        self.__fixer.on_update = self.on_update.emit
        self.__fixer.on_error = self.on_error.emit
        self.__fixer.on_finish = self.on_finish.emit

    def run(self):
        """Run timestamp task."""
        if self.__embed_picasa_dates:
            self.__fixer.embed_picasa_dates()
        else:
            self.__fixer.apply_folder_name_dates()


def main():  # pragma: no cover
    """Initialize application and show main window."""
    locale.setlocale(locale.LC_ALL, "")
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication(sys.argv)
    window = MainWindow()
    window.show()

    return app.exec()
