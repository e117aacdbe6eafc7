from .file_reader import FileReader
from .options import read_command_filter, read_name_list
from .wordlist import read_wordlist

__all__ = [
    "FileReader",
    "read_command_filter",
    "read_name_list",
    "read_wordlist",
]
