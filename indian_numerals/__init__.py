"""
Indian Numerals — spoken English <-> Indian-grouped numerals.

Architecture: NumberToWords / WordsToNumber → IndianGrouping → display string
Philosophy:  Pure functions over strings. Same input, same output, always.
"""

__version__ = "1.0.0"
