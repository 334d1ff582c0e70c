"""Synthetic JPEG files with EXIF blocks for tests."""

from io import BytesIO
import struct

from PIL import Image

from image_library_renamer.exif import ExifReader, ExifTag

JFIF_SEGMENT = b"\xff\xe0" + struct.pack(">H", 16) + b"JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00"


def create_thumbnail() -> bytes:
    data = BytesIO()
    Image.new("RGB", (16, 12), "red").save(data, "JPEG")
    return data.getvalue()


class ExifBuilder:
    """Builds JPEG files with EXIF blocks of known content."""

    def __init__(self, byte_order="II"):
        self.byte_order = byte_order
        self.endian = "<" if byte_order == "II" else ">"
        self.magic = 0x002A
        self.exif_header = b"Exif\x00\x00"
        self.include_exif_pointer = True
        self.ifd0 = []
        self.exif = []
        self.gps = []
        self.ifd1 = []
        self.thumbnail = None
        self.thumbnail_padding = b""

    def pack(self, fmt, *values) -> bytes:
        return struct.pack(self.endian + fmt, *values)

    def ascii(self, tag, text):
        data = text.encode() + b"\x00"
        return (tag, 2, len(data), data)

    def byte(self, tag, *values):
        return (tag, 1, len(values), bytes(values))

    def sbyte(self, tag, *values):
        return (tag, 6, len(values), self.pack("b" * len(values), *values))

    def undefined(self, tag, data):
        return (tag, 7, len(data), data)

    def short(self, tag, *values):
        return (tag, 3, len(values), self.pack("H" * len(values), *values))

    def sshort(self, tag, *values):
        return (tag, 8, len(values), self.pack("h" * len(values), *values))

    def long(self, tag, *values):
        return (tag, 4, len(values), self.pack("I" * len(values), *values))

    def slong(self, tag, *values):
        return (tag, 9, len(values), self.pack("i" * len(values), *values))

    def rational(self, tag, *pairs):
        values = [v for pair in pairs for v in pair]
        return (tag, 5, len(pairs), self.pack("II" * len(pairs), *values))

    def srational(self, tag, *pairs):
        values = [v for pair in pairs for v in pair]
        return (tag, 10, len(pairs), self.pack("ii" * len(pairs), *values))

    def single(self, tag, *values):
        return (tag, 11, len(values), self.pack("f" * len(values), *values))

    def double(self, tag, *values):
        return (tag, 12, len(values), self.pack("d" * len(values), *values))

    def tiff(self) -> bytes:
        def ifd_size(entries: int) -> int:
            return 2 + 12 * entries + 4

        has_thumbnail = self.thumbnail is not None
        ifd0_count = len(self.ifd0) + int(self.include_exif_pointer) + int(bool(self.gps))
        ifd1_count = len(self.ifd1) + (3 if has_thumbnail else 0)

        offset = 8 + ifd_size(ifd0_count)
        exif_offset = offset
        offset += ifd_size(len(self.exif))
        gps_offset = offset if self.gps else 0
        if self.gps:
            offset += ifd_size(len(self.gps))
        ifd1_offset = offset if ifd1_count else 0
        if ifd1_count:
            offset += ifd_size(ifd1_count)
        data_offset = offset

        data_size = sum(
            len(e[3]) for e in self.ifd0 + self.exif + self.gps + self.ifd1 if len(e[3]) > 4
        )

        ifd0 = list(self.ifd0)
        if self.include_exif_pointer:
            ifd0.append(self.long(ExifTag.EXIF_IFD_POINTER, exif_offset))
        if self.gps:
            ifd0.append(self.long(ExifTag.GPS_IFD_POINTER, gps_offset))

        ifd1 = list(self.ifd1)
        if has_thumbnail:
            ifd1.append(self.short(ExifTag.COMPRESSION, 6))
            ifd1.append(self.long(ExifTag.JPEG_INTERCHANGE_FORMAT, data_offset + data_size))
            ifd1.append(self.long(ExifTag.JPEG_INTERCHANGE_FORMAT_LENGTH, len(self.thumbnail)))

        data_area = bytearray()

        def write_ifd(entries, next_offset) -> bytes:
            out = self.pack("H", len(entries))
            for tag, tiff_type, count, data in entries:
                out += self.pack("HHI", tag, tiff_type, count)
                if len(data) > 4:
                    out += self.pack("I", data_offset + len(data_area))
                    data_area.extend(data)
                else:
                    out += data.ljust(4, b"\x00")
            return out + self.pack("I", next_offset)

        body = write_ifd(ifd0, ifd1_offset)
        body += write_ifd(self.exif, 0)
        if self.gps:
            body += write_ifd(self.gps, 0)
        if ifd1_count:
            body += write_ifd(ifd1, 0)

        header = self.byte_order.encode() + self.pack("H", self.magic) + self.pack("I", 8)
        tiff = header + body + bytes(data_area)

        if has_thumbnail:
            tiff += self.thumbnail_padding + self.thumbnail

        return tiff

    def jpeg(self) -> bytes:
        payload = self.exif_header + self.tiff()
        app1 = b"\xff\xe1" + struct.pack(">H", len(payload) + 2) + payload
        return b"\xff\xd8" + JFIF_SEGMENT + app1 + b"\xff\xd9"

    def open(self) -> ExifReader:
        return ExifReader(BytesIO(self.jpeg()))
