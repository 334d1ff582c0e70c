"""
EXIF metadata reader for JPEG files.

The reader locates the APP1 segment of a JPEG stream, parses its TIFF header
and catalogues the offsets of every tag in the main image directories (IFD0,
the EXIF sub-IFD and the optional GPS sub-IFD) and in the thumbnail directory
(IFD1). Tag values are only read and converted when requested.
"""

import math
import re
import struct
from datetime import datetime
from enum import IntEnum
from pathlib import Path
from typing import BinaryIO, Dict, Iterator, Optional, Tuple, Union

from dateutil.parser import isoparse

# Exif 2.2, page 28: unknown dates may have every character but the colons blank
BLANK_DATE_TIME = re.compile(
    r"^[\s0]{4}[:\s][\s0]{2}[:\s][\s0]{5}[:\s][\s0]{2}[:\s][\s0]{2}$"
)

JPEG_SOI = 0xFFD8
JPEG_EOI = b"\xff\xd9"
APP1 = 0xE1
TIFF_MAGIC = 0x002A
JPEG_COMPRESSION = 6


class FormatError(Exception):
    """Raised if the stream isn't a JPEG with well formed EXIF data."""


class TiffType(IntEnum):
    """TIFF field types."""

    BYTE = 1
    ASCII = 2
    SHORT = 3
    LONG = 4
    RATIONAL = 5
    SBYTE = 6
    UNDEFINED = 7
    SSHORT = 8
    SLONG = 9
    SRATIONAL = 10
    FLOAT = 11
    DOUBLE = 12

    @property
    def size(self) -> int:
        """Return length in bytes of a single component."""
        return _TYPE_SIZES[self]


_TYPE_SIZES = {
    TiffType.BYTE: 1,
    TiffType.ASCII: 1,
    TiffType.SBYTE: 1,
    TiffType.UNDEFINED: 1,
    TiffType.SHORT: 2,
    TiffType.SSHORT: 2,
    TiffType.LONG: 4,
    TiffType.SLONG: 4,
    TiffType.FLOAT: 4,
    TiffType.RATIONAL: 8,
    TiffType.SRATIONAL: 8,
    TiffType.DOUBLE: 8,
}

# struct codes of a single component, without byte order prefix
_TYPE_CODES = {
    TiffType.BYTE: "B",
    TiffType.SBYTE: "b",
    TiffType.SHORT: "H",
    TiffType.SSHORT: "h",
    TiffType.LONG: "I",
    TiffType.SLONG: "i",
    TiffType.RATIONAL: "II",
    TiffType.SRATIONAL: "ii",
    TiffType.FLOAT: "f",
    TiffType.DOUBLE: "d",
}

_INTEGER_TYPES = (
    TiffType.BYTE,
    TiffType.SBYTE,
    TiffType.UNDEFINED,
    TiffType.SHORT,
    TiffType.SSHORT,
    TiffType.LONG,
    TiffType.SLONG,
)


class ExifTag(IntEnum):
    """Identifiers of commonly used EXIF tags."""

    # GPS sub-IFD
    GPS_VERSION_ID = 0x0000
    GPS_LATITUDE_REF = 0x0001
    GPS_LATITUDE = 0x0002
    GPS_LONGITUDE_REF = 0x0003
    GPS_LONGITUDE = 0x0004
    GPS_ALTITUDE_REF = 0x0005
    GPS_ALTITUDE = 0x0006
    GPS_TIME_STAMP = 0x0007
    GPS_DATE_STAMP = 0x001D

    # IFD0 / IFD1
    IMAGE_WIDTH = 0x0100
    IMAGE_LENGTH = 0x0101
    COMPRESSION = 0x0103
    IMAGE_DESCRIPTION = 0x010E
    MAKE = 0x010F
    MODEL = 0x0110
    ORIENTATION = 0x0112
    X_RESOLUTION = 0x011A
    Y_RESOLUTION = 0x011B
    RESOLUTION_UNIT = 0x0128
    SOFTWARE = 0x0131
    DATE_TIME = 0x0132
    ARTIST = 0x013B
    JPEG_INTERCHANGE_FORMAT = 0x0201
    JPEG_INTERCHANGE_FORMAT_LENGTH = 0x0202
    COPYRIGHT = 0x8298
    EXIF_IFD_POINTER = 0x8769
    GPS_IFD_POINTER = 0x8825

    # EXIF sub-IFD
    EXPOSURE_TIME = 0x829A
    F_NUMBER = 0x829D
    EXPOSURE_PROGRAM = 0x8822
    ISO_SPEED_RATINGS = 0x8827
    EXIF_VERSION = 0x9000
    DATE_TIME_ORIGINAL = 0x9003
    DATE_TIME_DIGITIZED = 0x9004
    SHUTTER_SPEED_VALUE = 0x9201
    APERTURE_VALUE = 0x9202
    EXPOSURE_BIAS_VALUE = 0x9204
    FLASH = 0x9209
    FOCAL_LENGTH = 0x920A
    MAKER_NOTE = 0x927C
    USER_COMMENT = 0x9286
    SUBSEC_TIME_ORIGINAL = 0x9291
    PIXEL_X_DIMENSION = 0xA002
    PIXEL_Y_DIMENSION = 0xA003


# Tags probed for the capture date, most reliable first
DATE_TAKEN_TAGS = (
    ExifTag.DATE_TIME_ORIGINAL,
    ExifTag.DATE_TIME_DIGITIZED,
    ExifTag.DATE_TIME,
    ExifTag.GPS_DATE_STAMP,
)


class Rational:
    """TIFF fraction, always stored in lowest terms."""

    def __init__(self, numerator: int, denominator: int):
        """
        Create new rational number.

        A zero denominator gives the 0/0 sentinel whose value is 0.0.
        """
        if denominator == 0:
            numerator = 0
        else:
            divisor = math.gcd(numerator, denominator)
            if denominator < 0:
                divisor = -divisor
            numerator //= divisor
            denominator //= divisor

        self.numerator = numerator
        self.denominator = denominator

    @property
    def is_defined(self) -> bool:
        """Return False for a zero denominator."""
        return self.denominator != 0

    def __float__(self) -> float:
        if self.denominator == 0:
            return 0.0
        return self.numerator / self.denominator

    def __eq__(self, other) -> bool:
        if isinstance(other, Rational):
            return (self.numerator, self.denominator) == (
                other.numerator,
                other.denominator,
            )
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.numerator, self.denominator))

    def __repr__(self) -> str:
        return f"Rational({self.numerator}, {self.denominator})"

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"


class TagValue:
    """
    Decoded value of a single tag.

    The Python type of `value` depends on `tiff_type` and `count`:

    - BYTE, UNDEFINED: int, or bytes for more than one component
    - ASCII: str
    - SBYTE, SHORT, SSHORT, LONG, SLONG: int
    - RATIONAL, SRATIONAL: Rational
    - FLOAT, DOUBLE: float

    Numeric types with more than one component are tuples of the above.
    Accessors raise TypeError when the value is of a different kind.
    """

    def __init__(self, tag: int, tiff_type: TiffType, count: int, value):
        self.tag = tag
        self.tiff_type = tiff_type
        self.count = count
        self.value = value

    @property
    def is_sequence(self) -> bool:
        """Return True if the value is a tuple of numeric components."""
        return isinstance(self.value, tuple)

    def __elements(self) -> tuple:
        if isinstance(self.value, tuple):
            return self.value
        if isinstance(self.value, bytes):
            return tuple(self.value)
        return (self.value,)

    def __kind_error(self, kind: str) -> TypeError:
        return TypeError(
            f"Tag 0x{self.tag:04X} holds {self.tiff_type.name}, not {kind}"
        )

    def as_int(self) -> int:
        """Return single integer value."""
        ints = self.as_ints()
        if len(ints) != 1:
            raise self.__kind_error("a single integer")
        return ints[0]

    def as_ints(self) -> Tuple[int, ...]:
        """Return integer components."""
        if self.tiff_type not in _INTEGER_TYPES:
            raise self.__kind_error("integers")
        return self.__elements()

    def as_rational(self) -> Rational:
        """Return single rational value."""
        rationals = self.as_rationals()
        if len(rationals) != 1:
            raise self.__kind_error("a single rational")
        return rationals[0]

    def as_rationals(self) -> Tuple[Rational, ...]:
        """Return rational components."""
        if self.tiff_type not in (TiffType.RATIONAL, TiffType.SRATIONAL):
            raise self.__kind_error("rationals")
        return self.__elements()

    def as_float(self) -> float:
        """Return single numeric value as float."""
        floats = self.as_floats()
        if len(floats) != 1:
            raise self.__kind_error("a single number")
        return floats[0]

    def as_floats(self) -> Tuple[float, ...]:
        """Return numeric components as floats."""
        if self.tiff_type == TiffType.ASCII:
            raise self.__kind_error("numbers")
        return tuple(float(element) for element in self.__elements())

    def as_str(self) -> str:
        """Return ASCII value without the terminating NUL."""
        if self.tiff_type != TiffType.ASCII:
            raise self.__kind_error("text")
        return self.value

    def as_bytes(self) -> bytes:
        """Return raw BYTE or UNDEFINED data."""
        if self.tiff_type not in (TiffType.BYTE, TiffType.UNDEFINED):
            raise self.__kind_error("bytes")
        if isinstance(self.value, bytes):
            return self.value
        return bytes((self.value,))

    def __repr__(self) -> str:
        return (
            f"TagValue(0x{self.tag:04X}, {self.tiff_type.name}, "
            f"count={self.count}, value={self.value!r})"
        )


def parse_date_time(text: str) -> Optional[datetime]:
    """
    Parse EXIF date string.

    Returns None for empty or blank ("    :  :     :  :  ") dates.
    """
    if len(text) == 0 or BLANK_DATE_TIME.match(text):
        return None

    try:
        # Plain dates (GPSDateStamp) are 10 characters long
        if len(text) == 10:
            return datetime.strptime(text, "%Y:%m:%d")
        return datetime.strptime(text, "%Y:%m:%d %H:%M:%S")
    except ValueError:
        pass  # try isoparse

    try:
        return isoparse(text)
    except ValueError as e:
        raise FormatError(f"Invalid date/time value ({text!r})") from e


class ExifReader:
    """
    Reads EXIF data from a JPEG file.

    The stream is kept open until the reader is closed. Use the reader as a
    context manager:

        with ExifReader(path) as reader:
            taken = reader.get_taken_time()
    """

    def __init__(self, source: Union[str, Path, BinaryIO]):
        """
        Open the stream, locate the EXIF block and catalogue its tags.

        Raises FormatError if the data can't be parsed. The stream is closed
        before the error propagates.
        """
        if isinstance(source, (str, Path)):
            self.__stream = open(source, "rb")
        else:
            self.__stream = source

        # JPEG markers are big endian, TIFF header redefines it later
        self.__byte_order = ">"
        self.__tiff_header_start = 0
        self.__main_catalogue: Dict[int, int] = {}
        self.__thumbnail_catalogue: Optional[Dict[int, int]] = None

        try:
            if not self.__stream.seekable():
                raise FormatError("EXIF reader requires a seekable stream")

            if self.__read_ushort() != JPEG_SOI:
                raise FormatError("File is not a valid JPEG")

            self.__seek_exif_block()
            self.__create_tag_index()
        except BaseException:
            self.close()
            raise

    def __enter__(self) -> "ExifReader":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Release the underlying stream."""
        self.__stream.close()

    @property
    def byte_order(self) -> str:
        """Return "little" or "big"."""
        return "little" if self.__byte_order == "<" else "big"

    @property
    def tag_ids(self) -> Tuple[int, ...]:
        """Return identifiers of all catalogued main image tags."""
        return tuple(sorted(self.__main_catalogue))

    @property
    def has_thumbnail(self) -> bool:
        """Return True if the file has a thumbnail IFD."""
        return self.__thumbnail_catalogue is not None

    def __contains__(self, tag: int) -> bool:
        return tag in self.__main_catalogue

    def __iter__(self) -> Iterator[int]:
        return iter(self.tag_ids)

    # Stream access

    def __read(self, count: int) -> bytes:
        data = self.__stream.read(count)
        if len(data) != count:
            raise FormatError("Unexpected end of file")
        return data

    def __unpack(self, fmt: str, data: bytes) -> tuple:
        return struct.unpack(self.__byte_order + fmt, data)

    def __read_ushort(self) -> int:
        return self.__unpack("H", self.__read(2))[0]

    def __read_uint(self) -> int:
        return self.__unpack("I", self.__read(4))[0]

    def __read_at(self, tiff_offset: int, count: int) -> bytes:
        """Read bytes from offset relative to the TIFF header."""
        self.__stream.seek(self.__tiff_header_start + tiff_offset)
        return self.__read(count)

    # Structure parsing

    def __seek_exif_block(self) -> None:
        """Skip JPEG segments until the APP1 marker."""
        while True:
            marker = self.__stream.read(2)
            if len(marker) != 2 or marker[0] != 0xFF:
                raise FormatError("EXIF block not found")

            if marker[1] == APP1:
                return

            length = self.__stream.read(2)
            if len(length) != 2:
                raise FormatError("EXIF block not found")

            # Segment length includes its own two bytes
            self.__stream.seek(struct.unpack(">H", length)[0] - 2, 1)

    def __create_tag_index(self) -> None:
        """Parse TIFF header and catalogue all IFDs."""
        self.__read_ushort()  # APP1 length

        if self.__read(4) != b"Exif":
            raise FormatError("EXIF data not found")

        if self.__read_ushort() != 0:
            raise FormatError("Malformed EXIF data")

        self.__tiff_header_start = self.__stream.tell()

        # "II" - Intel, "MM" - Motorola
        self.__byte_order = "<" if self.__read(2) == b"II" else ">"

        if self.__read_ushort() != TIFF_MAGIC:
            raise FormatError("Error in TIFF data")

        ifd_offset = self.__read_uint()

        self.__stream.seek(self.__tiff_header_start + ifd_offset)
        self.__catalogue_ifd(self.__main_catalogue)

        # Offset to IFD1 directly follows the IFD0 entries
        thumbnail_offset = self.__read_uint()

        exif_offset = self.__get_pointer(ExifTag.EXIF_IFD_POINTER)
        if exif_offset is None:
            raise FormatError("Unable to locate EXIF data")

        self.__stream.seek(self.__tiff_header_start + exif_offset)
        self.__catalogue_ifd(self.__main_catalogue)

        gps_offset = self.__get_pointer(ExifTag.GPS_IFD_POINTER)
        if gps_offset is not None:
            self.__stream.seek(self.__tiff_header_start + gps_offset)
            self.__catalogue_ifd(self.__main_catalogue)

        if thumbnail_offset != 0:
            self.__thumbnail_catalogue = {}
            self.__stream.seek(self.__tiff_header_start + thumbnail_offset)
            self.__catalogue_ifd(self.__thumbnail_catalogue)

    def __catalogue_ifd(self, catalogue: Dict[int, int]) -> None:
        """Record offsets of all entries of IFD at current position."""
        entry_count = self.__read_ushort()

        for _ in range(entry_count):
            tag = self.__read_ushort()
            catalogue[tag] = self.__stream.tell() - 2

            # Each entry is 12 bytes long
            self.__stream.seek(10, 1)

    def __get_pointer(self, tag: int) -> Optional[int]:
        value = self.__get_tag_value(self.__main_catalogue, tag)
        if value is None:
            return None

        try:
            return value.as_int()
        except TypeError as e:
            raise FormatError(f"Invalid pointer tag 0x{tag:04X}") from e

    # Tag retrieval

    def get_tag(self, tag: int) -> Optional[TagValue]:
        """Return decoded value of main image tag or None if it's absent."""
        return self.__get_tag_value(self.__main_catalogue, tag)

    def get_thumbnail_tag(self, tag: int) -> Optional[TagValue]:
        """Return decoded value of thumbnail tag or None if it's absent."""
        if self.__thumbnail_catalogue is None:
            return None
        return self.__get_tag_value(self.__thumbnail_catalogue, tag)

    def get_date_time(self, tag: int) -> Optional[datetime]:
        """
        Return tag parsed as a date.

        None is returned if the tag doesn't exist or holds a blank date.
        """
        value = self.get_tag(tag)
        if value is None:
            return None

        if value.tiff_type != TiffType.ASCII:
            raise FormatError(f"Tag 0x{tag:04X} is not a date")

        return parse_date_time(value.as_str())

    def get_taken_time(self) -> Optional[datetime]:
        """Return date of taking the picture from the first tag that has one."""
        for tag in DATE_TAKEN_TAGS:
            date_time = self.get_date_time(tag)
            if date_time is not None:
                return date_time

        return None

    def __get_tag_value(
        self, catalogue: Dict[int, int], tag: int
    ) -> Optional[TagValue]:
        if tag not in catalogue:
            return None

        self.__stream.seek(catalogue[tag])

        if self.__read_ushort() != tag:
            raise FormatError("Tag number not at expected offset")

        type_id = self.__read_ushort()
        count = self.__read_uint()
        value_field = self.__read(4)

        try:
            tiff_type = TiffType(type_id)
        except ValueError as e:
            raise FormatError(f"Unknown TIFF data type: {type_id}") from e

        size = count * tiff_type.size

        # Values longer than 4 bytes are stored elsewhere
        if size > 4:
            offset = self.__unpack("I", value_field)[0]
            data = self.__read_at(offset, size)
        else:
            data = value_field[:size]

        return TagValue(tag, tiff_type, count, self.__convert(tiff_type, count, data))

    def __convert(self, tiff_type: TiffType, count: int, data: bytes):
        """Convert raw tag data to Python values."""
        if tiff_type == TiffType.ASCII:
            text = data.decode("utf-8", errors="replace")
            return text.split("\0", 1)[0]

        if tiff_type in (TiffType.BYTE, TiffType.UNDEFINED):
            if count == 1:
                return data[0]
            return data

        values = self.__unpack(_TYPE_CODES[tiff_type] * count, data)

        if tiff_type in (TiffType.RATIONAL, TiffType.SRATIONAL):
            values = tuple(
                Rational(values[i], values[i + 1]) for i in range(0, len(values), 2)
            )

        if count == 1:
            return values[0]
        return values

    # Thumbnail

    def get_thumbnail(self) -> Optional[bytes]:
        """
        Return JPEG thumbnail data.

        Only JPEG compressed thumbnails are supported. None is returned if the
        image has no thumbnail or its data is damaged.
        """
        values = [
            self.get_thumbnail_tag(tag)
            for tag in (
                ExifTag.COMPRESSION,
                ExifTag.JPEG_INTERCHANGE_FORMAT,
                ExifTag.JPEG_INTERCHANGE_FORMAT_LENGTH,
            )
        ]
        if None in values:
            return None

        try:
            compression, offset, length = [value.as_int() for value in values]
        except TypeError:
            # Not usable as a thumbnail location
            return None

        if compression != JPEG_COMPRESSION:
            return None

        self.__stream.seek(self.__tiff_header_start + offset)

        # Thumbnail may be padded, scan to the SOI marker
        previous = -1
        for _ in range(length):
            current = self.__stream.read(1)
            if len(current) == 0:
                return None

            if previous == 0xFF and current[0] == 0xD8:
                break
            previous = current[0]
        else:
            return None

        self.__stream.seek(-2, 1)

        data = self.__stream.read(length)
        if len(data) != length or not data.endswith(JPEG_EOI):
            return None

        return data
