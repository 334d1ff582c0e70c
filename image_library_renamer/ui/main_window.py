# -*- coding: utf-8 -*-

# Form implementation generated from reading ui file 'main_window.ui'
#
# Created by: PyQt5 UI code generator 5.15.9
#
# WARNING: Any manual changes made to this file will be lost when pyuic5 is
# run again.  Do not edit this file unless you know what you are doing.


from PyQt5 import QtCore, QtGui, QtWidgets


class Ui_MainWindow(object):
    def setupUi(self, MainWindow):
        MainWindow.setObjectName("MainWindow")
        MainWindow.resize(560, 480)
        self.centralwidget = QtWidgets.QWidget(MainWindow)
        self.centralwidget.setObjectName("centralwidget")
        self.verticalLayout = QtWidgets.QVBoxLayout(self.centralwidget)
        self.verticalLayout.setObjectName("verticalLayout")
        self.tabWidget = QtWidgets.QTabWidget(self.centralwidget)
        self.tabWidget.setObjectName("tabWidget")
        self.propertiesTab = QtWidgets.QWidget()
        self.propertiesTab.setObjectName("propertiesTab")
        self.gridLayout = QtWidgets.QGridLayout(self.propertiesTab)
        self.gridLayout.setObjectName("gridLayout")
        self.inputDirectoryLabel = QtWidgets.QLabel(self.propertiesTab)
        self.inputDirectoryLabel.setObjectName("inputDirectoryLabel")
        self.gridLayout.addWidget(self.inputDirectoryLabel, 0, 0, 1, 1)
        self.inputDirectoryPathEdit = QtWidgets.QLineEdit(self.propertiesTab)
        self.inputDirectoryPathEdit.setObjectName("inputDirectoryPathEdit")
        self.gridLayout.addWidget(self.inputDirectoryPathEdit, 0, 1, 1, 1)
        self.inputDirectoryBrowseButton = QtWidgets.QPushButton(self.propertiesTab)
        self.inputDirectoryBrowseButton.setObjectName("inputDirectoryBrowseButton")
        self.gridLayout.addWidget(self.inputDirectoryBrowseButton, 0, 2, 1, 1)
        self.datePatternLabel = QtWidgets.QLabel(self.propertiesTab)
        self.datePatternLabel.setObjectName("datePatternLabel")
        self.gridLayout.addWidget(self.datePatternLabel, 1, 0, 1, 1)
        self.datePatternComboBox = QtWidgets.QComboBox(self.propertiesTab)
        self.datePatternComboBox.setEditable(True)
        self.datePatternComboBox.setObjectName("datePatternComboBox")
        self.datePatternComboBox.addItem("")
        self.datePatternComboBox.addItem("")
        self.datePatternComboBox.addItem("")
        self.datePatternComboBox.addItem("")
        self.gridLayout.addWidget(self.datePatternComboBox, 1, 1, 1, 2)
        self.searchPatternLabel = QtWidgets.QLabel(self.propertiesTab)
        self.searchPatternLabel.setObjectName("searchPatternLabel")
        self.gridLayout.addWidget(self.searchPatternLabel, 2, 0, 1, 1)
        self.searchPatternEdit = QtWidgets.QLineEdit(self.propertiesTab)
        self.searchPatternEdit.setObjectName("searchPatternEdit")
        self.gridLayout.addWidget(self.searchPatternEdit, 2, 1, 1, 2)
        self.skipFoldersLabel = QtWidgets.QLabel(self.propertiesTab)
        self.skipFoldersLabel.setObjectName("skipFoldersLabel")
        self.gridLayout.addWidget(self.skipFoldersLabel, 3, 0, 1, 1)
        self.skipFoldersEdit = QtWidgets.QLineEdit(self.propertiesTab)
        self.skipFoldersEdit.setObjectName("skipFoldersEdit")
        self.gridLayout.addWidget(self.skipFoldersEdit, 3, 1, 1, 2)
        self.useExifCheckBox = QtWidgets.QCheckBox(self.propertiesTab)
        self.useExifCheckBox.setChecked(True)
        self.useExifCheckBox.setObjectName("useExifCheckBox")
        self.gridLayout.addWidget(self.useExifCheckBox, 4, 0, 1, 3)
        self.useFileDateCheckBox = QtWidgets.QCheckBox(self.propertiesTab)
        self.useFileDateCheckBox.setChecked(True)
        self.useFileDateCheckBox.setObjectName("useFileDateCheckBox")
        self.gridLayout.addWidget(self.useFileDateCheckBox, 5, 0, 1, 3)
        self.recursiveCheckBox = QtWidgets.QCheckBox(self.propertiesTab)
        self.recursiveCheckBox.setChecked(True)
        self.recursiveCheckBox.setObjectName("recursiveCheckBox")
        self.gridLayout.addWidget(self.recursiveCheckBox, 6, 0, 1, 3)
        self.testModeCheckBox = QtWidgets.QCheckBox(self.propertiesTab)
        self.testModeCheckBox.setObjectName("testModeCheckBox")
        self.gridLayout.addWidget(self.testModeCheckBox, 7, 0, 1, 3)
        self.skipTopLevelCheckBox = QtWidgets.QCheckBox(self.propertiesTab)
        self.skipTopLevelCheckBox.setChecked(True)
        self.skipTopLevelCheckBox.setObjectName("skipTopLevelCheckBox")
        self.gridLayout.addWidget(self.skipTopLevelCheckBox, 8, 0, 1, 3)
        self.skipNumericCheckBox = QtWidgets.QCheckBox(self.propertiesTab)
        self.skipNumericCheckBox.setChecked(True)
        self.skipNumericCheckBox.setObjectName("skipNumericCheckBox")
        self.gridLayout.addWidget(self.skipNumericCheckBox, 9, 0, 1, 3)
        self.skipIfXmpCheckBox = QtWidgets.QCheckBox(self.propertiesTab)
        self.skipIfXmpCheckBox.setChecked(True)
        self.skipIfXmpCheckBox.setObjectName("skipIfXmpCheckBox")
        self.gridLayout.addWidget(self.skipIfXmpCheckBox, 10, 0, 1, 3)
        self.skipIfNameHasDateCheckBox = QtWidgets.QCheckBox(self.propertiesTab)
        self.skipIfNameHasDateCheckBox.setChecked(True)
        self.skipIfNameHasDateCheckBox.setObjectName("skipIfNameHasDateCheckBox")
        self.gridLayout.addWidget(self.skipIfNameHasDateCheckBox, 11, 0, 1, 3)
        self.buttonsLayout = QtWidgets.QHBoxLayout()
        self.buttonsLayout.setObjectName("buttonsLayout")
        spacerItem = QtWidgets.QSpacerItem(40, 20, QtWidgets.QSizePolicy.Expanding, QtWidgets.QSizePolicy.Minimum)
        self.buttonsLayout.addItem(spacerItem)
        self.renameButton = QtWidgets.QPushButton(self.propertiesTab)
        self.renameButton.setObjectName("renameButton")
        self.buttonsLayout.addWidget(self.renameButton)
        self.cancelButton = QtWidgets.QPushButton(self.propertiesTab)
        self.cancelButton.setObjectName("cancelButton")
        self.buttonsLayout.addWidget(self.cancelButton)
        self.gridLayout.addLayout(self.buttonsLayout, 12, 0, 1, 3)
        self.tabWidget.addTab(self.propertiesTab, "")
        self.logTab = QtWidgets.QWidget()
        self.logTab.setObjectName("logTab")
        self.logLayout = QtWidgets.QVBoxLayout(self.logTab)
        self.logLayout.setObjectName("logLayout")
        self.statusList = QtWidgets.QListWidget(self.logTab)
        self.statusList.setObjectName("statusList")
        self.logLayout.addWidget(self.statusList)
        self.statusProgress = QtWidgets.QProgressBar(self.logTab)
        self.statusProgress.setProperty("value", 0)
        self.statusProgress.setObjectName("statusProgress")
        self.logLayout.addWidget(self.statusProgress)
        self.tabWidget.addTab(self.logTab, "")
        self.timestampsTab = QtWidgets.QWidget()
        self.timestampsTab.setObjectName("timestampsTab")
        self.timestampsLayout = QtWidgets.QGridLayout(self.timestampsTab)
        self.timestampsLayout.setObjectName("timestampsLayout")
        self.timestampsInfoLabel = QtWidgets.QLabel(self.timestampsTab)
        self.timestampsInfoLabel.setWordWrap(True)
        self.timestampsInfoLabel.setObjectName("timestampsInfoLabel")
        self.timestampsLayout.addWidget(self.timestampsInfoLabel, 0, 0, 1, 2)
        self.minDaysDiffLabel = QtWidgets.QLabel(self.timestampsTab)
        self.minDaysDiffLabel.setObjectName("minDaysDiffLabel")
        self.timestampsLayout.addWidget(self.minDaysDiffLabel, 1, 0, 1, 1)
        self.minDaysDiffSpinBox = QtWidgets.QSpinBox(self.timestampsTab)
        self.minDaysDiffSpinBox.setMaximum(36500)
        self.minDaysDiffSpinBox.setProperty("value", 365)
        self.minDaysDiffSpinBox.setObjectName("minDaysDiffSpinBox")
        self.timestampsLayout.addWidget(self.minDaysDiffSpinBox, 1, 1, 1, 1)
        self.embedPicasaDatesButton = QtWidgets.QPushButton(self.timestampsTab)
        self.embedPicasaDatesButton.setObjectName("embedPicasaDatesButton")
        self.timestampsLayout.addWidget(self.embedPicasaDatesButton, 2, 0, 1, 1)
        self.folderNameDatesButton = QtWidgets.QPushButton(self.timestampsTab)
        self.folderNameDatesButton.setObjectName("folderNameDatesButton")
        self.timestampsLayout.addWidget(self.folderNameDatesButton, 2, 1, 1, 1)
        spacerItem1 = QtWidgets.QSpacerItem(20, 40, QtWidgets.QSizePolicy.Minimum, QtWidgets.QSizePolicy.Expanding)
        self.timestampsLayout.addItem(spacerItem1, 3, 0, 1, 2)
        self.tabWidget.addTab(self.timestampsTab, "")
        self.verticalLayout.addWidget(self.tabWidget)
        MainWindow.setCentralWidget(self.centralwidget)
        self.menubar = QtWidgets.QMenuBar(MainWindow)
        self.menubar.setGeometry(QtCore.QRect(0, 0, 560, 22))
        self.menubar.setObjectName("menubar")
        self.menuFile = QtWidgets.QMenu(self.menubar)
        self.menuFile.setObjectName("menuFile")
        MainWindow.setMenuBar(self.menubar)
        self.actionQuit = QtWidgets.QAction(MainWindow)
        self.actionQuit.setObjectName("actionQuit")
        self.menuFile.addAction(self.actionQuit)
        self.menubar.addAction(self.menuFile.menuAction())

        self.retranslateUi(MainWindow)
        self.tabWidget.setCurrentIndex(0)
        QtCore.QMetaObject.connectSlotsByName(MainWindow)

    def retranslateUi(self, MainWindow):
        _translate = QtCore.QCoreApplication.translate
        MainWindow.setWindowTitle(_translate("MainWindow", "Photo Folder Renamer"))
        self.inputDirectoryLabel.setText(_translate("MainWindow", "Folder"))
        self.inputDirectoryBrowseButton.setText(_translate("MainWindow", "..."))
        self.datePatternLabel.setText(_translate("MainWindow", "Rename Pattern"))
        self.datePatternComboBox.setItemText(0, _translate("MainWindow", "%Y-%m-%d [folder]"))
        self.datePatternComboBox.setItemText(1, _translate("MainWindow", "%Y-%m [folder]"))
        self.datePatternComboBox.setItemText(2, _translate("MainWindow", "[folder] %Y-%m-%d"))
        self.datePatternComboBox.setItemText(3, _translate("MainWindow", "%Y-%m-%d"))
        self.searchPatternLabel.setText(_translate("MainWindow", "Filename Pattern"))
        self.searchPatternEdit.setText(_translate("MainWindow", "*"))
        self.skipFoldersLabel.setText(_translate("MainWindow", "Skip Folders"))
        self.skipFoldersEdit.setText(_translate("MainWindow", "Photo Stream,Picasa"))
        self.useExifCheckBox.setText(_translate("MainWindow", "Use EXIF data to get date"))
        self.useFileDateCheckBox.setText(_translate("MainWindow", "Use file date if no EXIF date"))
        self.recursiveCheckBox.setText(_translate("MainWindow", "Recurse directories"))
        self.testModeCheckBox.setText(_translate("MainWindow", "Test mode (read only mode)"))
        self.skipTopLevelCheckBox.setText(_translate("MainWindow", "Skip top level folder (\"My Pictures\")"))
        self.skipNumericCheckBox.setText(_translate("MainWindow", "Skip numeric folders (years)"))
        self.skipIfXmpCheckBox.setText(_translate("MainWindow", "Skip if .xmp sidecar files found"))
        self.skipIfNameHasDateCheckBox.setText(_translate("MainWindow", "Skip if name already has date"))
        self.renameButton.setText(_translate("MainWindow", "Rename my folders!"))
        self.cancelButton.setText(_translate("MainWindow", "Cancel"))
        self.tabWidget.setTabText(self.tabWidget.indexOf(self.propertiesTab), _translate("MainWindow", "Properties"))
        self.tabWidget.setTabText(self.tabWidget.indexOf(self.logTab), _translate("MainWindow", "Log"))
        self.timestampsInfoLabel.setText(_translate("MainWindow", "Sets the date of files in every subfolder to the date Picasa stored in its .picasa.ini file. Folders without a Picasa date use the date their name starts with. Only files more than the given number of days newer than that date are changed."))
        self.minDaysDiffLabel.setText(_translate("MainWindow", "Minimum difference (days)"))
        self.embedPicasaDatesButton.setText(_translate("MainWindow", "Embed Picasa Dates"))
        self.folderNameDatesButton.setText(_translate("MainWindow", "Use Folder Name Dates"))
        self.tabWidget.setTabText(self.tabWidget.indexOf(self.timestampsTab), _translate("MainWindow", "Embed Picasa Dates"))
        self.menuFile.setTitle(_translate("MainWindow", "File"))
        self.actionQuit.setText(_translate("MainWindow", "Quit"))
        self.actionQuit.setShortcut(_translate("MainWindow", "Ctrl+Q"))
