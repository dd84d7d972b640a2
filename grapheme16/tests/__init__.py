"""Test suite for grapheme16

Run with ``python3 -m grapheme16.tests`` or ``python3 setup.py test``.
"""
