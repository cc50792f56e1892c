"""Galvopath - Optimize vector drawings for galvo laser scanners.

Galvopath turns a drawing made of disconnected polyline shapes into a single
ordered stream of samples for a laser projector. Each output point is one
fixed time slice, so the pipeline inserts blanking, dwell points at corners
and intermediate points on long jumps to keep the scanning head on track.

Example:
    $ galvopath preview --shapes 3 --sides 5 --max-travel 20

This optimizes a row of three pentagons and prints how many samples each
pipeline stage produced.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
