"""Progress bars, spinners, ETA and throughput tracking for long-running operations."""

__version__ = "1.0.0"
__all__ = ["eta", "progress", "throughput"]