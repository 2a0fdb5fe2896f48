"""Run two commands as a pipeline from an input file to an output file."""

__version__ = "0.1.0"