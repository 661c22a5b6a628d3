from .asciiGridParser import AsciiGridHeader, parse_ascii_grid
