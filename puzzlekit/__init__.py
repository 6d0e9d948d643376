"""Classic algorithm puzzles over lists, strings, integers, linked lists, trees and calendars."""

__version__ = "0.1.0"