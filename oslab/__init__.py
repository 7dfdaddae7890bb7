"""Operating-system exercises: a bounded channel, number and vector values, a pipe pipeline and a process killer."""

__version__ = "0.1.0"