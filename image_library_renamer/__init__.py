"""
An application for dating folders of pictures.

The program walks a tree of photo folders, finds the date each folder was shot
from EXIF data of its JPEG files (or from file timestamps) and renames the
folder so its name starts with that date. It can also restore file timestamps
from Picasa's .picasa.ini files and from dates already present in folder names.
"""

__version__ = "0.2.0"
