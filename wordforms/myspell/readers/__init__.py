from .file_reader import FileReader, ZipReader
from .aff import read_aff, detect_charset
from .dic import read_dic

__all__ = [
    "FileReader",
    "ZipReader",
    "read_aff",
    "detect_charset",
    "read_dic"
]
