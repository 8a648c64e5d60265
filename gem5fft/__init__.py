"""Launch and post-process gem5 FFT runs over garnet topologies."""

__version__ = "0.1.0"
