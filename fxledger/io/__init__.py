"""
IO — внешние коллабораторы ядра: файл транзакций и JSON хранилище.
"""

from .storage import load_rate_table, load_user_directory, save_user_directory
from .transactions import iter_requests, parse_line, tokenize

__all__ = [
    "iter_requests",
    "parse_line",
    "tokenize",
    "load_rate_table",
    "load_user_directory",
    "save_user_directory",
]
