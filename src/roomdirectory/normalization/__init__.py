"""
Raw value normalization.

Turns trimmed CSV strings into flags, quantities and integers.
"""
