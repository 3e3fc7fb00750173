import os
import sys


def get_base_path() -> str:
    """
    Return the application's base directory.

    Returns:
        str: the executable's directory when frozen, otherwise the project root
    """
    if getattr(sys, 'frozen', False):
        return os.path.dirname(sys.executable)
    # Running from source: two levels above notas/utils.py
    return os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
